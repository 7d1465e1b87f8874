"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django_billdocs.models.mixins import *
from django_billdocs.models.sequence import *
from django_billdocs.models.billing import *
from django_billdocs.models.invoice import *
from django_billdocs.models.purchase_order import *
from django_billdocs.models.client import *
