"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

"""Django BillDocs"""
__version__ = '0.1.0'
__license__ = 'GPLv3 License'

__url__ = 'https://github.com/django-billdocs/django-billdocs'
