"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

from django.views.generic import View

from django_billdocs.io.documents import ClientService
from django_billdocs.views.mixins import JSONResponseMixIn

__all__ = [
    'ClientModelCreateView',
    'ClientModelListView',
    'ClientModelDetailView',
    'ClientModelUpdateView',
    'ClientModelDeleteView'
]


class ClientModelViewMixIn(JSONResponseMixIn):
    OBJECT_LABEL = 'Client'

    def get_service(self) -> ClientService:
        return ClientService()


class ClientModelCreateView(ClientModelViewMixIn, View):
    http_method_names = ['post']

    def post(self, request, *args, **kwargs):
        service = self.get_service()
        client_model = service.create(payload=self.get_json_body())
        return self.get_success_response(
            message='Client created successfully',
            data=service.serialize(client_model),
            status=201
        )


class ClientModelListView(ClientModelViewMixIn, View):
    http_method_names = ['get']

    def get(self, request, *args, **kwargs):
        service = self.get_service()
        client_list = service.list(search=request.GET.get('search', '').strip())
        return self.get_success_response(data=[service.serialize(c) for c in client_list])


class ClientModelDetailView(ClientModelViewMixIn, View):
    http_method_names = ['get']

    def get(self, request, *args, **kwargs):
        service = self.get_service()
        return self.get_success_response(data=service.serialize(service.get(self.kwargs['client_pk'])))


class ClientModelUpdateView(ClientModelViewMixIn, View):
    http_method_names = ['put', 'patch']

    def put(self, request, *args, **kwargs):
        service = self.get_service()
        client_model = service.update(self.kwargs['client_pk'], payload=self.get_json_body())
        return self.get_success_response(
            message='Client updated successfully',
            data=service.serialize(client_model)
        )

    def patch(self, request, *args, **kwargs):
        return self.put(request, *args, **kwargs)


class ClientModelDeleteView(ClientModelViewMixIn, View):
    http_method_names = ['delete']

    def delete(self, request, *args, **kwargs):
        data = self.get_service().delete(self.kwargs['client_pk'])
        return self.get_success_response(message='Client deleted successfully', data=data)
