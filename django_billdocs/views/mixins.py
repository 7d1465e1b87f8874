"""
Django BillDocs.
Licensed under the GPLv3 Agreement.
"""

import json

from django.core.exceptions import ValidationError, ObjectDoesNotExist
from django.http import JsonResponse, Http404
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from django_billdocs.exceptions import DocumentSchemaError, InvalidDocumentIdError
from django_billdocs.settings import logger


def get_error_messages(error: ValidationError) -> str:
    return '; '.join(error.messages)


@method_decorator(csrf_exempt, name='dispatch')
class JSONResponseMixIn:
    """
    Wraps every response in the {success, message, data} envelope and maps exceptions to status codes.
    ValidationError maps to 400, Http404 & ObjectDoesNotExist map to 404, anything else maps to 500.
    """
    OBJECT_LABEL = 'Document'

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except InvalidDocumentIdError as e:
            return self.get_error_response(message=get_error_messages(e),
                                           error=get_error_messages(e),
                                           status=400)
        except ValidationError as e:
            return self.get_error_response(message=f'Invalid {self.OBJECT_LABEL.lower()} data',
                                           error=get_error_messages(e),
                                           status=400)
        except (Http404, ObjectDoesNotExist) as e:
            return self.get_error_response(message=f'{self.OBJECT_LABEL} not found',
                                           error=str(e),
                                           status=404)
        except Exception as e:
            logger.exception(f'Unhandled error on {request.method} {request.path}')
            return self.get_error_response(message=f'Error processing {self.OBJECT_LABEL.lower()} request',
                                           error=str(e),
                                           status=500)

    def get_success_response(self, data=None, message=None, status=200, **extra):
        response_data = {'success': True}
        if message:
            response_data['message'] = message
        if data is not None:
            response_data['data'] = data
        response_data.update(extra)
        return JsonResponse(response_data, status=status)

    def get_error_response(self, message: str, error: str, status: int):
        return JsonResponse({
            'success': False,
            'message': message,
            'error': error
        }, status=status)

    def get_json_body(self):
        try:
            return json.loads(self.request.body or b'{}')
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DocumentSchemaError(f'Malformed JSON body. {e}') from e

    def get_positive_int_param(self, name: str, default: int) -> int:
        value = self.request.GET.get(name)
        if value in (None, ''):
            return default
        try:
            value = int(value)
        except ValueError as e:
            raise DocumentSchemaError(f'{name} must be a positive integer.') from e
        if value < 1:
            raise DocumentSchemaError(f'{name} must be a positive integer.')
        return value
