import pytest
import requests
from requests.structures import CaseInsensitiveDict

from service_coordinator import HTTPMethod
from service_coordinator.exceptions import TransportError
from service_coordinator.transport import RequestDescriptor, RequestsTransport

URL = "https://example.com/transport"


def test_execute_returns_status_body_and_headers(requests_mock):
    requests_mock.post(URL, status_code=202, content=b"accepted", headers={"X-Trace": "t-1"})
    transport = RequestsTransport()
    request = RequestDescriptor(
        url=URL,
        method=HTTPMethod.POST,
        headers=CaseInsensitiveDict({"Accept": "application/json"}),
        body=b'{"a": 1}',
    )

    response = transport.execute(request)

    assert response.status_code == 202
    assert response.content == b"accepted"
    assert response.headers["X-Trace"] == "t-1"
    assert requests_mock.last_request.body == b'{"a": 1}'


def test_execute_wraps_request_exceptions(requests_mock):
    requests_mock.get(URL, exc=requests.exceptions.SSLError("CERTIFICATE_VERIFY_FAILED"))
    transport = RequestsTransport()

    with pytest.raises(TransportError) as excinfo:
        transport.execute(RequestDescriptor(url=URL))

    assert str(excinfo.value) == "CERTIFICATE_VERIFY_FAILED"
    assert isinstance(excinfo.value.details, requests.exceptions.SSLError)


def test_unconfigured_transport_uses_requests_defaults():
    transport = RequestsTransport.from_configuration(None)

    assert transport.configuration is None
    assert transport.timeout is None
