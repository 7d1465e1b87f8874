"""
Django BillDocs.
Licensed under the GPLv3 Agreement.

Generic JSON views shared by the invoice and purchase order APIs.
"""

from django.http import HttpResponse
from django.views.generic import View

from django_billdocs.report import DocumentRenderer
from django_billdocs.settings import DJANGO_BILLDOCS_PAGINATE_BY
from django_billdocs.views.mixins import JSONResponseMixIn

RENDER_MODE_HEADER = 'X-BillDocs-Render-Mode'
OMITTED_ITEMS_HEADER = 'X-BillDocs-Omitted-Items'


class BillingDocumentViewMixIn(JSONResponseMixIn):
    SERVICE_CLASS = None

    def get_service(self):
        return self.SERVICE_CLASS()


class BillingDocumentCreateView(BillingDocumentViewMixIn, View):
    http_method_names = ['post']

    def post(self, request, *args, **kwargs):
        service = self.get_service()
        document_model = service.create(payload=self.get_json_body())
        return self.get_success_response(
            message=f'{self.OBJECT_LABEL} created successfully',
            data=service.serialize(document_model),
            status=201
        )


class BillingDocumentListView(BillingDocumentViewMixIn, View):
    http_method_names = ['get']

    def get(self, request, *args, **kwargs):
        page = self.get_positive_int_param('page', default=1)
        limit = self.get_positive_int_param('limit', default=DJANGO_BILLDOCS_PAGINATE_BY)
        service = self.get_service()
        object_list, total_pages = service.list(
            search=request.GET.get('search', '').strip(),
            page=page,
            limit=limit
        )
        return self.get_success_response(
            data=[service.serialize(o) for o in object_list],
            totalPages=total_pages,
            currentPage=page
        )


class BillingDocumentDetailView(BillingDocumentViewMixIn, View):
    http_method_names = ['get']

    def get(self, request, *args, **kwargs):
        service = self.get_service()
        document_model = service.get(self.kwargs['document_pk'])
        return self.get_success_response(data=service.serialize(document_model))


class BillingDocumentUpdateView(BillingDocumentViewMixIn, View):
    http_method_names = ['put', 'patch']

    def put(self, request, *args, **kwargs):
        service = self.get_service()
        document_model = service.update(self.kwargs['document_pk'], payload=self.get_json_body())
        return self.get_success_response(
            message=f'{self.OBJECT_LABEL} updated successfully',
            data=service.serialize(document_model)
        )

    def patch(self, request, *args, **kwargs):
        return self.put(request, *args, **kwargs)


class BillingDocumentDeleteView(BillingDocumentViewMixIn, View):
    http_method_names = ['delete']

    def delete(self, request, *args, **kwargs):
        data = self.get_service().delete(self.kwargs['document_pk'])
        return self.get_success_response(
            message=f'{self.OBJECT_LABEL} deleted successfully',
            data=data
        )


class BillingDocumentDeleteAllView(BillingDocumentViewMixIn, View):
    http_method_names = ['delete', 'post']

    def delete(self, request, *args, **kwargs):
        body = self.get_json_body()
        ids = body.get('ids') if isinstance(body, dict) else None
        deleted_count = self.get_service().delete_many(ids)
        return self.get_success_response(
            message=f'{deleted_count} {self.OBJECT_LABEL.lower()}(s) deleted successfully',
            deletedCount=deleted_count
        )

    def post(self, request, *args, **kwargs):
        return self.delete(request, *args, **kwargs)


class BillingDocumentDownloadView(BillingDocumentViewMixIn, View):
    http_method_names = ['get']
    document_format = None

    def get_renderer(self) -> DocumentRenderer:
        return DocumentRenderer()

    def get(self, request, *args, **kwargs):
        document_model = self.get_service().get(self.kwargs['document_pk'])
        rendered = self.get_renderer().render(document_model, fmt=self.document_format)
        response = HttpResponse(rendered.content, content_type=rendered.content_type)
        response['Content-Disposition'] = f'attachment; filename={rendered.filename}'
        response[RENDER_MODE_HEADER] = rendered.render_mode
        response[OMITTED_ITEMS_HEADER] = str(rendered.omitted_item_count)
        return response
