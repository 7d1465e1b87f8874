"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from unittest.mock import patch
from uuid import uuid4

from django_billdocs.models import PurchaseOrderModel, PurchaseOrderLineItemModel
from django_billdocs.tests.base import DjangoBillDocsBaseTest


class PurchaseOrderModelAPITest(DjangoBillDocsBaseTest):

    def test_create(self):
        payload = self.get_purchase_order_payload(item_count=2, paymentTerms='net-60')
        response = self.post_json(self.url('po-create'), payload)
        self.assertEqual(response.status_code, 201)

        data = response.json()['data']
        self.assertRegex(data['poNumber'], r'^PO-\d{6}-001$')
        self.assertEqual(data['paymentTerms'], 'net-60')
        self.assertEqual(data['vendor'], payload['vendor'])
        self.assertEqual(data['deliverTo'], payload['deliverTo'])
        self.assertEqual(data['poDate'], payload['poDate'])
        self.assertEqual(data['deliveryDate'], payload['deliveryDate'])
        self.assertEqual(data['totalAmount'], payload['totalAmount'])

    def test_create_invalid_terms(self):
        payload = self.get_purchase_order_payload(paymentTerms='net-15')
        response = self.post_json(self.url('po-create'), payload)
        self.assertEqual(response.status_code, 400)
        self.assertFalse(PurchaseOrderModel.objects.exists())

    def test_create_without_items(self):
        payload = self.get_purchase_order_payload(items=[])
        self.assertEqual(self.post_json(self.url('po-create'), payload).status_code, 400)

    def test_list_and_search(self):
        po_models = [self.create_purchase_order() for _ in range(3)]
        body = self.CLIENT.get(self.url('po-list'), {'limit': 10}).json()
        self.assertEqual(len(body['data']), 3)
        self.assertEqual(body['totalPages'], 1)

        vendor_name = po_models[1].vendor['name']
        body = self.CLIENT.get(self.url('po-list'), {'search': vendor_name.upper()}).json()
        self.assertIn(str(po_models[1].uuid), [d['_id'] for d in body['data']])

    def test_update_keeps_number(self):
        po_model = self.create_purchase_order()
        response = self.put_json(self.url('po-update', document_pk=po_model.uuid),
                                 {'poNumber': 'PO-000000-000', 'paymentTerms': 'advance', 'withSignature': True})
        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['poNumber'], po_model.document_number)
        self.assertEqual(data['paymentTerms'], 'advance')
        self.assertTrue(data['withSignature'])

    def test_delete_all(self):
        po_models = [self.create_purchase_order() for _ in range(2)]
        response = self.delete_json(self.url('po-delete-all'), {'ids': [str(p.uuid) for p in po_models]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['deletedCount'], 2)
        self.assertFalse(PurchaseOrderLineItemModel.objects.exists())

    def test_delete_all_malformed_id(self):
        po_model = self.create_purchase_order()
        response = self.delete_json(self.url('po-delete-all'), {'ids': [str(po_model.uuid), '123']})
        self.assertEqual(response.status_code, 400)
        self.assertTrue(PurchaseOrderModel.objects.filter(uuid=po_model.uuid).exists())

    def test_download_word(self):
        po_model = self.create_purchase_order(withSignature=True)
        response = self.CLIENT.get(self.url('po-download-word', document_pk=po_model.uuid))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Disposition'],
                         f'attachment; filename=PurchaseOrder_{po_model.document_number}.docx')

    def test_download_pdf_fallback(self):
        po_model = self.create_purchase_order()
        with patch('django_billdocs.report.pdf_core.subprocess.run', side_effect=FileNotFoundError):
            response = self.CLIENT.get(self.url('po-download-pdf', document_pk=po_model.uuid))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['X-BillDocs-Render-Mode'], 'fallback')
        self.assertEqual(response['Content-Disposition'],
                         f'attachment; filename=PurchaseOrder_{po_model.document_number}.pdf')
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_download_invalid_id(self):
        self.assertEqual(self.CLIENT.get(self.url('po-download-pdf', document_pk='nope')).status_code, 400)
        self.assertEqual(self.CLIENT.get(self.url('po-download-word', document_pk=uuid4())).status_code, 404)

    def test_routes_without_trailing_slash(self):
        created = self.post_json('/api/purchase-order/create', self.get_purchase_order_payload())
        self.assertEqual(created.status_code, 201)
        po_id = created.json()['data']['_id']

        self.assertEqual(self.CLIENT.get('/api/purchase-order/get').status_code, 200)
        self.assertEqual(self.put_json(f'/api/purchase-order/put/{po_id}', {'paymentTerms': 'cod'}).status_code, 200)
        self.assertEqual(self.delete_json(f'/api/purchase-order/delete/{po_id}').status_code, 200)
