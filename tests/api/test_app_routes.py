"""Landing page and health check."""


async def test_landing_page(client):
    res = await client.get("/")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "/api/exercise/new-user" in res.text


async def test_stylesheet_is_served(client):
    res = await client.get("/public/style.css")

    assert res.status_code == 200


async def test_health(client):
    res = await client.get("/health")

    assert res.json() == {"status": "healthy", "service": "Exercise Tracker"}
