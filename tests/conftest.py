"""Shared fixtures for gradient bin viewer tests."""
import json

import httpx
import pytest

from gradient_bin_viewer.config import Settings

SAMPLE_XML = """<root>
  <colorSequence>
    <keypoint time="1" color="#FFFFFF"/>
    <keypoint time="0" color="#000000"/>
    <keypoint time="0.5" color="#888888"/>
  </colorSequence>
  <propsColors>
    <prop name="border">#445566</prop>
    <prop name="shadow"> #112233 </prop>
  </propsColors>
  <firstColor>#000000</firstColor>
  <lastColor>#FFFFFF</lastColor>
</root>"""

SAMPLE_JSON = json.dumps({
    "colorSequence": [
        {"time": 1, "color": "#FFF"},
        {"time": 0, "color": "#000"},
        {"time": 0.5, "color": "#888"},
    ],
    "propsColors": [{"name": "border", "color": "#445566"}],
    "firstColor": "#000",
    "lastColor": "#FFF",
})


@pytest.fixture
def settings():
    return Settings(base_url="https://bins.test/v3/b/", timeout=1.0)


@pytest.fixture
def make_client():
    """Build an httpx.Client whose requests are answered by `handler`."""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def bin_client(make_client):
    """Client serving a single bin whose record holds `gradient_data`."""

    def factory(gradient_data, status_code=200):
        def handler(request):
            return httpx.Response(
                status_code,
                json={"record": {"gradientData": gradient_data}, "metadata": {"id": "abc"}},
            )

        return make_client(handler)

    return factory
