"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django_billdocs.views.invoice import *
from django_billdocs.views.purchase_order import *
from django_billdocs.views.client import *
