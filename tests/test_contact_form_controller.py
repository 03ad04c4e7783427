import asyncio
import json

import httpx

from jrtech.client.contact_form import (
    ContactFormController, GENERIC_FAILURE_MESSAGE, NETWORK_FAILURE_MESSAGE
)
from jrtech.main import app as backend_app

CONTACT_URL = "http://testserver/contact"


def submit_through(transport, email: str, message: str, submits: int = 1):
    """Fill the form, submit it `submits` times and return each resulting state"""
    async def run():
        states = []
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            controller = ContactFormController(api_url=CONTACT_URL, client=client)
            controller.set_email(email)
            controller.set_message(message)
            for _ in range(submits):
                state = await controller.submit()
                states.append((state.success, state.feedback, state.email, state.message, state.loading))
        return states

    return asyncio.run(run())


def backend_transport():
    return httpx.ASGITransport(app=backend_app)


def test_successful_submit_clears_inputs():
    [(success, feedback, email, message, loading)] = submit_through(backend_transport(), "a@b.com", "hi")

    assert success is True
    assert feedback == "Your message has been sent successfully!"
    assert email == ""
    assert message == ""
    assert loading is False


def test_rejected_submit_keeps_inputs_and_shows_server_message():
    [(success, feedback, email, message, loading)] = submit_through(backend_transport(), "", "hi")

    assert success is False
    assert feedback == "Email and message are required."
    assert message == "hi"
    assert loading is False


def test_unreachable_backend_reports_network_error():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    [(success, feedback, email, _, loading)] = submit_through(httpx.MockTransport(refuse), "a@b.com", "hi")

    assert success is False
    assert feedback == NETWORK_FAILURE_MESSAGE
    assert email == "a@b.com"
    assert loading is False


def test_non_json_success_reply_is_treated_as_network_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>ok</html>"))

    [(success, feedback, email, message, loading)] = submit_through(transport, "a@b.com", "hi")

    assert success is False
    assert feedback == NETWORK_FAILURE_MESSAGE
    assert email == "a@b.com"
    assert message == "hi"
    assert loading is False


def test_non_json_error_reply_is_treated_as_network_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, text="Internal Server Error"))

    [(success, feedback, _, _, loading)] = submit_through(transport, "a@b.com", "hi")

    assert success is False
    assert feedback == NETWORK_FAILURE_MESSAGE
    assert loading is False


def test_failure_without_message_uses_generic_text():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"success": False}))

    [(success, feedback, _, _, loading)] = submit_through(transport, "a@b.com", "hi")

    assert success is False
    assert feedback == GENERIC_FAILURE_MESSAGE
    assert loading is False


def test_timeout_is_logged_with_its_type(caplog):
    def slow(request):
        raise httpx.ReadTimeout("", request=request)

    [(success, feedback, _, _, _)] = submit_through(httpx.MockTransport(slow), "a@b.com", "hi")

    assert feedback == NETWORK_FAILURE_MESSAGE
    errors = [r.getMessage() for r in caplog.records if r.name == "jrtech.client.contact_form"]
    assert any("ReadTimeout" in text for text in errors)


def test_submit_sends_email_and_message_as_json():
    seen = {}

    def capture(request):
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(200, json={"success": True, "message": "ok"})

    submit_through(httpx.MockTransport(capture), "a@b.com", "hi")

    assert seen["method"] == "POST"
    assert seen["body"] == {"email": "a@b.com", "message": "hi"}
    assert seen["content_type"] == "application/json"


def test_resubmit_resets_previous_feedback():
    replies = iter([
        httpx.Response(400, json={"success": False, "message": "Email and message are required."}),
        httpx.Response(200, json={"success": True, "message": "Your message has been sent successfully!"}),
    ])
    transport = httpx.MockTransport(lambda request: next(replies))

    first, second = submit_through(transport, "a@b.com", "hi", submits=2)

    assert first[0] is False
    assert second[0] is True
    assert second[1] == "Your message has been sent successfully!"


def test_default_client_has_no_timeout(monkeypatch):
    seen = {}
    real_client = httpx.AsyncClient

    def handler(request):
        seen["timeout"] = request.extensions["timeout"]
        return httpx.Response(200, json={"success": True, "message": "ok"})

    def client_factory(**kwargs):
        seen["kwargs"] = kwargs
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    controller = ContactFormController(api_url=CONTACT_URL)
    controller.set_email("a@b.com")
    controller.set_message("hi")

    state = asyncio.run(controller.submit())

    assert state.success is True
    assert seen["kwargs"]["timeout"] is None
    assert set(seen["timeout"].values()) == {None}


def test_default_url_comes_from_settings(monkeypatch):
    monkeypatch.setenv("CONTACT_API_URL", "http://localhost:9999/contact")

    controller = ContactFormController()

    assert controller.api_url == "http://localhost:9999/contact"
    assert controller.state.loading is False
    assert controller.state.success is None
