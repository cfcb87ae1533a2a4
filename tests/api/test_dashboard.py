from datetime import date

from httpx import AsyncClient


async def test_admin_dashboard(client: AsyncClient, admin, warden, student, other_block_student):
    await client.post("/api/complaints", headers=student.headers, json={"title": "Fan broken", "description": "Room fan"})
    await client.post(
        "/api/suggestions",
        headers=other_block_student.headers,
        json={"title": "Gym", "description": "Add a gym"},
    )
    await client.post(
        "/api/invoices",
        headers=admin.headers,
        json={"studentId": student.profile_id, "amount": 500, "dueDate": date.today().isoformat()},
    )

    response = await client.get("/api/dashboard/admin/stats", headers=admin.headers)
    assert response.status_code == 200
    data = response.json()
    assert data["totalStudents"] == 2
    assert data["totalWardens"] == 1
    assert data["pendingComplaints"] == 1
    assert data["openSuggestions"] == 1
    assert data["unpaidInvoices"] == 1
    assert [a["kind"] for a in data["recentActivity"]] == ["suggestion", "complaint"]


async def test_warden_dashboard_counts_block_only(client: AsyncClient, warden, student, other_block_student):
    await client.post("/api/complaints", headers=student.headers, json={"title": "A", "description": "a"})
    await client.post("/api/complaints", headers=other_block_student.headers, json={"title": "B", "description": "b"})

    response = await client.get("/api/dashboard/warden/stats", headers=warden.headers)
    data = response.json()
    assert data["hostelBlock"] == "A"
    assert data["totalStudents"] == 1
    assert data["pendingComplaints"] == 1
    assert [a["title"] for a in data["recentActivity"]] == ["A"]
    assert data["recentActivity"][0]["studentName"] == student.user.name


async def test_student_dashboard(client: AsyncClient, warden, student):
    await client.post(
        "/api/attendance/mark",
        headers=warden.headers,
        json={"studentId": student.profile_id, "date": date.today().isoformat(), "status": "Present"},
    )
    response = await client.get("/api/dashboard/student/stats", headers=student.headers)
    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["id"] == student.profile_id
    assert data["pendingComplaints"] == 0
    assert data["unpaidInvoices"] == 0
    assert data["attendancePercentage"] == 100.0


async def test_dashboards_are_role_specific(client: AsyncClient, student, warden):
    assert (await client.get("/api/dashboard/admin/stats", headers=student.headers)).status_code == 403
    assert (await client.get("/api/dashboard/student/stats", headers=warden.headers)).status_code == 403
