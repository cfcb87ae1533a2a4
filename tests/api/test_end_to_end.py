"""Admin enrols a student, the student complains, the block warden resolves it."""
from httpx import AsyncClient


async def test_complaint_lifecycle(client: AsyncClient, admin, create_warden):
    block_warden = await create_warden(hostel_block="H1")
    other_warden = await create_warden(hostel_block="H2")

    created = await client.post(
        "/api/students",
        headers=admin.headers,
        json={
            "name": "Student Hundred",
            "email": "r100@example.com",
            "password": "secret100",
            "rollNumber": "R100",
            "hostelBlock": "H1",
            "roomNumber": "101",
        },
    )
    assert created.status_code == 201

    login = await client.post(
        "/api/auth/login",
        json={"email": "r100@example.com", "password": "secret100", "role": "student"},
    )
    assert login.status_code == 200
    student_headers = {"Authorization": f"Bearer {login.json()['token']}"}

    raised = await client.post(
        "/api/complaints",
        headers=student_headers,
        json={"title": "No hot water", "description": "Geyser on floor 1", "category": "Plumbing"},
    )
    assert raised.status_code == 201
    complaint_id = raised.json()["id"]

    mine = await client.get("/api/complaints/my-complaints", headers=student_headers)
    assert [c["id"] for c in mine.json()] == [complaint_id]

    seen_by_block = await client.get("/api/complaints/warden", headers=block_warden.headers)
    assert [c["id"] for c in seen_by_block.json()] == [complaint_id]
    seen_by_other = await client.get("/api/complaints/warden", headers=other_warden.headers)
    assert seen_by_other.json() == []

    resolved = await client.put(
        f"/api/complaints/{complaint_id}/resolve",
        headers=block_warden.headers,
        json={"resolution": "Geyser repaired"},
    )
    assert resolved.status_code == 200

    current = await client.get(f"/api/complaints/{complaint_id}", headers=student_headers)
    assert current.json()["status"] == "Resolved"
    assert current.json()["resolution"]

    delete = await client.delete(f"/api/complaints/{complaint_id}", headers=student_headers)
    assert delete.status_code == 403
