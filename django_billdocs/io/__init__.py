"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""
