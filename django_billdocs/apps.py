"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class DjangoBillDocsConfig(AppConfig):
    name = 'django_billdocs'
    verbose_name = _('Django BillDocs')
    default_auto_field = 'django.db.models.BigAutoField'
