"""Health Probe — GET /healthz."""


async def test_healthz_returns_200_empty_body(client):
    res = await client.get("/healthz")
    assert res.status_code == 200
    assert res.content == b""


async def test_healthz_rejects_post(client):
    res = await client.post("/healthz")
    assert res.status_code == 405
    assert res.text == "method not allowed"
