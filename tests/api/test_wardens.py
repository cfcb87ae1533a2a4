from httpx import AsyncClient


async def test_admin_manages_wardens(client: AsyncClient, admin):
    created = await client.post(
        "/api/wardens",
        headers=admin.headers,
        json={
            "name": "Meena Iyer",
            "email": "meena@example.com",
            "password": "secret1",
            "hostelBlock": "B",
            "contactNumber": "9800000000",
        },
    )
    assert created.status_code == 201
    warden_id = created.json()["id"]

    listed = await client.get("/api/wardens", headers=admin.headers)
    assert [w["id"] for w in listed.json()] == [warden_id]

    updated = await client.put(f"/api/wardens/{warden_id}", headers=admin.headers, json={"hostelBlock": "C"})
    assert updated.status_code == 200
    assert updated.json()["hostelBlock"] == "C"

    deleted = await client.delete(f"/api/wardens/{warden_id}", headers=admin.headers)
    assert deleted.status_code == 200
    missing = await client.get(f"/api/wardens/{warden_id}", headers=admin.headers)
    assert missing.status_code == 404


async def test_new_warden_can_log_in(client: AsyncClient, admin):
    await client.post(
        "/api/wardens",
        headers=admin.headers,
        json={
            "name": "Karan",
            "email": "karan@example.com",
            "password": "secret1",
            "hostelBlock": "A",
            "contactNumber": "9800000001",
        },
    )
    response = await client.post(
        "/api/auth/login",
        json={"email": "karan@example.com", "password": "secret1", "role": "warden"},
    )
    assert response.status_code == 200


async def test_warden_list_is_admin_only(client: AsyncClient, warden):
    response = await client.get("/api/wardens", headers=warden.headers)
    assert response.status_code == 403


async def test_warden_reads_only_self(client: AsyncClient, warden, create_warden):
    other = await create_warden(hostel_block="B")

    me = await client.get("/api/wardens/me", headers=warden.headers)
    assert me.status_code == 200
    assert me.json()["hostelBlock"] == "A"

    own = await client.get(f"/api/wardens/{warden.profile_id}", headers=warden.headers)
    assert own.status_code == 200
    foreign = await client.get(f"/api/wardens/{other.profile_id}", headers=warden.headers)
    assert foreign.status_code == 403


async def test_student_cannot_read_wardens(client: AsyncClient, student, warden):
    response = await client.get(f"/api/wardens/{warden.profile_id}", headers=student.headers)
    assert response.status_code == 403


async def test_update_rejects_null_hostel_block(client: AsyncClient, admin, warden):
    response = await client.put(
        f"/api/wardens/{warden.profile_id}",
        headers=admin.headers,
        json={"hostelBlock": None},
    )
    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["hostelBlock"]

    unchanged = await client.get(f"/api/wardens/{warden.profile_id}", headers=admin.headers)
    assert unchanged.json()["hostelBlock"] == "A"
