from httpx import AsyncClient

WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


async def test_menu_is_seeded_on_first_read(client: AsyncClient, student):
    response = await client.get("/api/mess/menu", headers=student.headers)
    assert response.status_code == 200
    menu = response.json()
    assert [m["day"] for m in menu] == WEEK
    assert menu[0]["breakfast"] == "Poha, Tea"

    again = await client.get("/api/mess/menu", headers=student.headers)
    assert [m["id"] for m in again.json()] == [m["id"] for m in menu]


async def test_warden_updates_a_day(client: AsyncClient, warden, student):
    await client.get("/api/mess/menu", headers=student.headers)
    response = await client.put(
        "/api/mess/menu/Friday",
        headers=warden.headers,
        json={"breakfast": "Upma", "lunch": "Veg Biryani", "dinner": "Khichdi", "specialMenu": True},
    )
    assert response.status_code == 200
    assert response.json()["specialMenu"] is True

    menu = (await client.get("/api/mess/menu", headers=student.headers)).json()
    friday = next(m for m in menu if m["day"] == "Friday")
    assert friday["lunch"] == "Veg Biryani"


async def test_day_update_requires_all_meals(client: AsyncClient, admin):
    response = await client.put("/api/mess/menu/Monday", headers=admin.headers, json={"breakfast": "Eggs"})
    assert response.status_code == 400


async def test_unknown_day_rejected(client: AsyncClient, admin):
    response = await client.put(
        "/api/mess/menu/Funday",
        headers=admin.headers,
        json={"breakfast": "a", "lunch": "b", "dinner": "c"},
    )
    assert response.status_code == 400


async def test_bulk_update(client: AsyncClient, admin):
    response = await client.put(
        "/api/mess/menu",
        headers=admin.headers,
        json=[
            {"day": "Sunday", "breakfast": "Puri", "lunch": "Thali", "dinner": "Soup"},
            {"day": "Monday", "breakfast": "Poha", "lunch": "Dal Rice", "dinner": "Roti", "notes": "No onion"},
        ],
    )
    assert response.status_code == 200
    assert [m["day"] for m in response.json()] == ["Monday", "Sunday"]
    assert response.json()[0]["notes"] == "No onion"


async def test_bulk_update_rejects_repeated_day(client: AsyncClient, admin):
    entry = {"day": "Monday", "breakfast": "a", "lunch": "b", "dinner": "c"}
    response = await client.put("/api/mess/menu", headers=admin.headers, json=[entry, entry])
    assert response.status_code == 400


async def test_student_cannot_edit_menu(client: AsyncClient, student):
    response = await client.put(
        "/api/mess/menu/Monday",
        headers=student.headers,
        json={"breakfast": "a", "lunch": "b", "dinner": "c"},
    )
    assert response.status_code == 403


async def test_feedback(client: AsyncClient, warden, student, other_block_student):
    submitted = await client.post(
        "/api/mess/feedback",
        headers=student.headers,
        json={"rating": 4, "feedback": "Dinner was great"},
    )
    assert submitted.status_code == 201
    assert submitted.json()["rating"] == 4
    assert "date" in submitted.json()

    await client.post("/api/mess/feedback", headers=other_block_student.headers, json={"feedback": "Too salty"})

    block = await client.get("/api/mess/feedback", headers=warden.headers)
    assert [f["feedback"] for f in block.json()] == ["Dinner was great"]

    mine = await client.get("/api/mess/feedback/mine", headers=other_block_student.headers)
    assert [f["feedback"] for f in mine.json()] == ["Too salty"]


async def test_feedback_rating_bounds(client: AsyncClient, student):
    response = await client.post("/api/mess/feedback", headers=student.headers, json={"rating": 6, "feedback": "x"})
    assert response.status_code == 400


async def test_students_cannot_read_all_feedback(client: AsyncClient, student):
    response = await client.get("/api/mess/feedback", headers=student.headers)
    assert response.status_code == 403
