"""
End-to-end ASGI tests for the registry HTTP API

Uses httpx.ASGITransport for in-process testing (no port binding).
"""

import pytest
import httpx

from gwregistry import BindingConfig, Registry, RegistryHubConfig
from gwregistry.web import create_app

# anyio_backend defaults to asyncio
pytestmark = pytest.mark.anyio


@pytest.fixture
def registry():
    return Registry(BindingConfig(max_devices_per_gateway=2))


@pytest.fixture
async def client(registry, anyio_backend):
    app = create_app(registry)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


async def put_device(client, **fields) -> int:
    resp = await client.put("/devices", json={"vendor": "acme", "status": "online", **fields})
    assert resp.status_code == 200, resp.text
    return resp.json()["uid"]


class TestGatewayApi:

    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.json() == {"status": "ok"}

    async def test_create_and_get(self, client):
        resp = await client.put("/gateways", json={"name": "g1", "ip": 16909060})
        assert resp.status_code == 200
        serial = resp.json()["serial"]

        resp = await client.get(f"/gateways/{serial}")
        assert resp.status_code == 200
        assert resp.json() == {"serial": serial, "name": "g1", "ip": 16909060, "devices": []}

        resp = await client.get("/gateways")
        assert resp.json() == [{"serial": serial, "name": "g1"}]

    async def test_unknown_gateway_is_404(self, client):
        resp = await client.get("/gateways/missing")
        assert resp.status_code == 404
        assert resp.json()["error"]["error_code"] == "GATEWAY_NOT_FOUND"

    async def test_missing_name_is_400(self, client):
        resp = await client.put("/gateways", json={"ip": 1})
        assert resp.status_code == 400
        assert resp.json()["error"]["type"] == "VALIDATION_ERROR"

    async def test_explicit_null_is_rejected_on_update(self, client, registry):
        serial = registry.upsert_gateway({"name": "g1", "ip": 1})

        resp = await client.put("/gateways", json={"serial": serial, "name": None})

        assert resp.status_code == 400
        assert registry.get_gateway(serial).name == "g1"

    async def test_wrong_json_type_is_422(self, client):
        resp = await client.put("/gateways", json={"name": "g1", "ip": "1.2.3.4"})
        assert resp.status_code == 422

    async def test_unknown_devices_in_upsert(self, client, registry):
        serial = registry.upsert_gateway({"name": "g1", "ip": 1})

        resp = await client.put("/gateways", json={"serial": serial, "devices": [1, 2, 3]})

        assert resp.status_code == 400
        assert resp.json()["error"]["details"]["device"] == 1
        assert registry.get_gateway(serial).devices == []

    async def test_capacity_on_upsert_is_409(self, client):
        uids = [await put_device(client) for _ in range(3)]
        resp = await client.put("/gateways", json={"name": "g1", "ip": 1, "devices": uids})
        assert resp.status_code == 409
        assert resp.json()["error"]["error_code"] == "CAPACITY_EXCEEDED"

    async def test_delete(self, client, registry):
        serial = registry.upsert_gateway({"name": "g1", "ip": 1})

        resp = await client.delete(f"/gateways/{serial}")
        assert resp.json() == {"ok": True}
        assert registry.get_gateway(serial) is None

        resp = await client.delete(f"/gateways/{serial}")
        assert resp.status_code == 200


class TestBindApi:

    async def test_bind_reports_partial_success(self, client, registry):
        uids = [await put_device(client) for _ in range(3)]
        serial = registry.upsert_gateway({"name": "g1", "ip": 1})

        resp = await client.post(f"/gateways/{serial}/bind", json={"devices": uids})

        assert resp.status_code == 200
        body = resp.json()
        assert body["bound"] == uids[:2]
        assert [f["uid"] for f in body["failed"]] == [uids[2]]

    async def test_bind_unknown_gateway_is_404(self, client):
        resp = await client.post("/gateways/unknown-serial/bind", json={"devices": [1]})
        assert resp.status_code == 404

    async def test_unbind(self, client, registry):
        uid = await put_device(client)
        serial = registry.upsert_gateway({"name": "g1", "ip": 1, "devices": [uid]})

        resp = await client.post(f"/gateways/{serial}/unbind", json={"devices": [uid]})

        assert resp.json() == {"ok": True}
        assert registry.get_gateway(serial).devices == []

    async def test_unbind_unknown_gateway_is_404(self, client):
        resp = await client.post("/gateways/unknown-serial/unbind", json={"devices": [1]})
        assert resp.status_code == 404


class TestDeviceApi:

    async def test_create_update_get(self, client):
        uid = await put_device(client)

        resp = await client.put("/devices", json={"uid": uid, "status": "offline"})
        assert resp.json() == {"uid": uid}

        resp = await client.get(f"/devices/{uid}")
        body = resp.json()
        assert body["vendor"] == "acme"
        assert body["status"] == "offline"
        assert isinstance(body["created_at"], float)

    async def test_bad_status_is_400(self, client):
        resp = await client.put("/devices", json={"vendor": "acme", "status": "asleep"})
        assert resp.status_code == 400

    async def test_list_all_and_by_gateway(self, client, registry):
        a = await put_device(client, vendor="a")
        b = await put_device(client, vendor="b")
        serial = registry.upsert_gateway({"name": "g1", "ip": 1, "devices": [b]})

        resp = await client.get("/devices")
        assert resp.json() == [{"uid": a, "vendor": "a"}, {"uid": b, "vendor": "b"}]

        resp = await client.get("/devices", params={"serial": serial})
        assert resp.json() == [{"uid": b, "vendor": "b"}]

    async def test_list_unknown_gateway_is_404(self, client):
        resp = await client.get("/devices", params={"serial": "missing"})
        assert resp.status_code == 404

    async def test_unknown_device_is_404(self, client):
        resp = await client.get("/devices/404")
        assert resp.status_code == 404
        assert resp.json()["error"]["error_code"] == "DEVICE_NOT_FOUND"

    async def test_delete_cascades(self, client, registry):
        uid = await put_device(client)
        serial = registry.upsert_gateway({"name": "g1", "ip": 1, "devices": [uid]})

        resp = await client.delete(f"/devices/{uid}")

        assert resp.status_code == 200
        assert registry.get_gateway(serial).devices == []


def test_create_app_builds_registry_from_config():
    config = RegistryHubConfig(binding=BindingConfig(max_devices_per_gateway=4))
    app = create_app(config=config)
    assert app.state.registry.index.capacity == 4
