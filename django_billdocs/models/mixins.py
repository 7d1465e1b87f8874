"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

This module implements the different model MixIns used on different Django BillDocs Models to implement common
functionality.
"""

from django.db import models

__all__ = [
    'CreateUpdateMixIn'
]


class CreateUpdateMixIn(models.Model):
    """
    Implements a created and an updated field to a base Django Model.

    Attributes
    ----------
    created: datetime
        A created timestamp. Defaults to now().
    updated: str
        An updated timestamp used to identify when models are updated.
    """
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True, null=True, blank=True)

    class Meta:
        abstract = True
