"""Crop and Color Routes — verifies transform, drag and color conversion over HTTP."""


async def test_transform_identity_without_settings(client):
    res = await client.post("/api/v1/logo/crop/transform", json={})
    assert res.json() == {
        "scale": 1.0, "translateXPercent": 0.0, "translateYPercent": 0.0,
        "originXPercent": 50.0, "originYPercent": 50.0,
        "cssTransform": "scale(1) translate(0%, 0%)", "cssOrigin": "50% 50%",
    }


async def test_transform_zoomed(client):
    res = await client.post("/api/v1/logo/crop/transform", json={
        "cropSettings": {"x": 20, "y": 80, "zoom": 2},
    })
    data = res.json()
    assert data["translateXPercent"] == 15.0
    assert data["translateYPercent"] == -15.0


async def test_drag_clamps(client):
    res = await client.post("/api/v1/logo/crop/drag", json={
        "cropSettings": {"x": 50, "y": 50, "zoom": 1}, "dx": 10000, "dy": -10000,
    })
    assert res.json() == {"x": 0.0, "y": 100.0, "zoom": 1.0}


async def test_drag_from_centre(client):
    res = await client.post("/api/v1/logo/crop/drag", json={"dx": 10, "dy": -20})
    assert res.json() == {"x": 45.0, "y": 60.0, "zoom": 1.0}


async def test_drag_requires_deltas(client):
    res = await client.post("/api/v1/logo/crop/drag", json={})
    assert res.status_code == 400


async def test_hex_to_hsl(client):
    res = await client.get("/api/v1/colors/hex-to-hsl", params={"value": "#c2a870"})
    assert res.json() == {"input": "#c2a870", "value": "41 40% 60%"}


async def test_hsl_to_hex_degrades_on_malformed_input(client):
    res = await client.get("/api/v1/colors/hsl-to-hex", params={"value": "gold"})
    assert res.status_code == 200
    assert res.json()["value"] == "#888888"
