# pylint: disable=missing-docstring
from django.test import RequestFactory, SimpleTestCase
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from slicer.fields import get_requested_fields, parse_fields


class ParseFieldsTest(SimpleTestCase):
    def test_parse(self):
        self.assertEqual(
            parse_fields("firstName,lastName"), ("firstName", "lastName")
        )
        self.assertEqual(parse_fields("email"), ("email",))

    def test_empty(self):
        self.assertEqual(parse_fields(None), ())
        self.assertEqual(parse_fields(""), ())
        self.assertEqual(parse_fields([]), ())
        self.assertEqual(parse_fields(",, ,"), ())

    def test_duplicates(self):
        self.assertEqual(
            parse_fields("email,firstName,email,lastName,firstName"),
            ("email", "firstName", "lastName"),
        )

    def test_whitespace(self):
        self.assertEqual(
            parse_fields(" firstName , lastName"), ("firstName", "lastName")
        )

    def test_multiple_values(self):
        self.assertEqual(
            parse_fields(["firstName,email", "lastName,email"]),
            ("firstName", "email", "lastName"),
        )

    def test_separator(self):
        self.assertEqual(parse_fields("a;b,c", separator=";"), ("a", "b,c"))


class RequestedFieldsTest(SimpleTestCase):
    def test_django_request(self):
        request = RequestFactory().get("/", {"fields": "firstName,lastName"})
        self.assertEqual(get_requested_fields(request), ("firstName", "lastName"))

    def test_rest_framework_request(self):
        request = Request(APIRequestFactory().get("/", {"fields": "email"}))
        self.assertEqual(get_requested_fields(request), ("email",))

    def test_repeated_param(self):
        request = RequestFactory().get("/?fields=firstName&fields=lastName,firstName")
        self.assertEqual(get_requested_fields(request), ("firstName", "lastName"))

    def test_custom_param(self):
        request = RequestFactory().get("/", {"only": "a|b", "fields": "c"})
        self.assertEqual(
            get_requested_fields(request, param="only", separator="|"), ("a", "b")
        )

    def test_missing_param(self):
        request = RequestFactory().get("/")
        self.assertEqual(get_requested_fields(request), ())
