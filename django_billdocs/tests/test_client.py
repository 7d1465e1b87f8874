"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from uuid import uuid4

from django_billdocs.models import ClientModel
from django_billdocs.tests.base import DjangoBillDocsBaseTest


class ClientModelAPITest(DjangoBillDocsBaseTest):

    def get_client_payload(self, **overrides) -> dict:
        payload = self.GENERATOR.get_client_payload()
        payload.update(overrides)
        return payload

    def test_create(self):
        payload = self.get_client_payload(name='  Globex Corporation  ')
        response = self.post_json(self.url('client-create'), payload)
        self.assertEqual(response.status_code, 201)
        data = response.json()['data']
        self.assertEqual(data['name'], 'Globex Corporation')
        self.assertEqual(data['gstin'], payload['gstin'])
        self.assertIn('_id', data)

    def test_duplicate_gstin(self):
        payload = self.get_client_payload()
        self.assertEqual(self.post_json(self.url('client-create'), payload).status_code, 201)
        response = self.post_json(self.url('client-create'), self.get_client_payload(gstin=payload['gstin']))
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()['success'])
        self.assertEqual(ClientModel.objects.count(), 1)

    def test_invalid_fields(self):
        url = self.url('client-create')
        self.assertEqual(self.post_json(url, self.get_client_payload(stateCode='123')).status_code, 400)
        self.assertEqual(self.post_json(url, self.get_client_payload(gstin='INVALID')).status_code, 400)
        self.assertEqual(self.post_json(url, {'name': 'Missing Fields'}).status_code, 400)

    def test_list_and_search(self):
        self.post_json(self.url('client-create'), self.get_client_payload(name='Initech'))
        self.post_json(self.url('client-create'), self.get_client_payload(name='Umbrella'))

        body = self.CLIENT.get(self.url('client-list')).json()
        self.assertEqual(len(body['data']), 2)

        body = self.CLIENT.get(self.url('client-list'), {'search': 'initech'}).json()
        self.assertEqual([c['name'] for c in body['data']], ['Initech'])

    def test_update(self):
        client_id = self.post_json(self.url('client-create'), self.get_client_payload()).json()['data']['_id']
        response = self.put_json(self.url('client-update', client_pk=client_id), {'address': '1 Main Street'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['address'], '1 Main Street')

    def test_detail_and_delete(self):
        client_id = self.post_json(self.url('client-create'), self.get_client_payload()).json()['data']['_id']
        self.assertEqual(self.CLIENT.get(self.url('client-detail', client_pk=client_id)).status_code, 200)
        self.assertEqual(self.delete_json(self.url('client-delete', client_pk=client_id)).status_code, 200)
        self.assertEqual(self.CLIENT.get(self.url('client-detail', client_pk=client_id)).status_code, 404)

    def test_invalid_id(self):
        response = self.CLIENT.get(self.url('client-detail', client_pk='abc'))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Invalid client ID')
        self.assertEqual(self.delete_json(self.url('client-delete', client_pk=uuid4())).status_code, 404)

    def test_routes_without_trailing_slash(self):
        created = self.post_json('/api/client/create', self.get_client_payload())
        self.assertEqual(created.status_code, 201)
        client_id = created.json()['data']['_id']

        self.assertEqual(self.CLIENT.get('/api/client/get').status_code, 200)
        self.assertEqual(self.put_json(f'/api/client/update/{client_id}', {'address': 'Dock 4'}).status_code, 200)
        self.assertEqual(self.delete_json(f'/api/client/delete/{client_id}').status_code, 200)
