"""
Tests for the Problem+JSON exception handler.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import RequestFactory
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import (
    GENERIC_ERROR_MESSAGE,
    ProblemDetailException,
    format_validation_errors,
    get_error_detail,
    problem_exception_handler,
)


def handle(exc, path='/api/burials'):
    request = RequestFactory().get(path)
    return problem_exception_handler(exc, {'request': request})


class TestProblemExceptionHandler:

    def test_validation_error_shape(self):
        response = handle(ValidationError({'child_name': ['This field is required.']}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response['Content-Type'] == 'application/problem+json'
        assert response.data['title'] == 'Bad Request'
        assert response.data['error'] == 'child_name: This field is required.'
        assert response.data['invalid_params'] == [
            {'name': 'child_name', 'reason': 'This field is required.'}
        ]
        assert response.data['instance'] == 'http://testserver/api/burials'

    def test_not_found_has_no_invalid_params(self):
        response = handle(NotFound())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'invalid_params' not in response.data
        assert response.data['error'] == 'Not found.'

    def test_problem_detail_exception(self):
        response = handle(ProblemDetailException(
            title='Conflict', detail='Still referenced', status_code=409))

        assert response.status_code == 409
        assert response.data['title'] == 'Conflict'
        assert response.data['detail'] == 'Still referenced'

    def test_django_validation_error_is_converted(self):
        response = handle(DjangoValidationError({'zone_number': ['Zone 2 already has a zonal leader.']}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['invalid_params'][0]['name'] == 'zone_number'

    def test_unhandled_exception_is_left_to_django(self):
        assert handle(RuntimeError('boom')) is None


class TestErrorDetail:

    def test_nested_list_errors_skip_valid_items(self):
        data = {'children': [{}, {'date_of_birth_child': ['This field is required.']}]}

        assert get_error_detail(data) == 'children: date_of_birth_child: This field is required.'

    def test_non_field_errors(self):
        assert get_error_detail({'non_field_errors': ['a', 'b']}) == 'a; b'

    def test_nested_reasons_are_flattened(self):
        params = format_validation_errors({'children': [{'name_of_child': ['Required.']}]})

        assert params == [{'name': 'children', 'reason': 'name_of_child: Required.'}]

    def test_generic_message_is_not_empty(self):
        assert GENERIC_ERROR_MESSAGE
