from datetime import date, timedelta

from httpx import AsyncClient

from app.models.base.enums import InvoiceStatus
from app.models.invoice.invoice import Invoice

TODAY = date.today()


async def issue(client: AsyncClient, account, student_id: str, **overrides) -> dict:
    body = {
        "studentId": student_id,
        "items": [{"description": "Room rent", "amount": 4000}, {"description": "Mess", "amount": 2500}],
        "dueDate": (TODAY + timedelta(days=15)).isoformat(),
    }
    body.update(overrides)
    response = await client.post("/api/invoices", headers=account.headers, json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def test_issue_invoice(client: AsyncClient, admin, student):
    invoice = await issue(client, admin, student.profile_id)
    assert invoice["amount"] == 6500
    assert invoice["status"] == "Pending"
    assert invoice["invoiceNumber"] == f"INV-{TODAY.year}-0001"
    assert invoice["issueDate"] == TODAY.isoformat()

    second = await issue(client, admin, student.profile_id, amount=100, items=[])
    assert second["invoiceNumber"] == f"INV-{TODAY.year}-0002"


async def test_invoice_needs_amount_or_items(client: AsyncClient, admin, student):
    response = await client.post(
        "/api/invoices",
        headers=admin.headers,
        json={"studentId": student.profile_id, "dueDate": TODAY.isoformat()},
    )
    assert response.status_code == 400


async def test_warden_issues_within_block_only(client: AsyncClient, warden, student, other_block_student):
    await issue(client, warden, student.profile_id)
    response = await client.post(
        "/api/invoices",
        headers=warden.headers,
        json={"studentId": other_block_student.profile_id, "amount": 10, "dueDate": TODAY.isoformat()},
    )
    assert response.status_code == 403


async def test_student_pays_own_invoice(client: AsyncClient, admin, student):
    invoice = await issue(client, admin, student.profile_id)
    paid = await client.post(f"/api/invoices/{invoice['id']}/pay", headers=student.headers, json={})
    assert paid.status_code == 200
    data = paid.json()
    assert data["status"] == "Paid"
    assert data["paymentMethod"] == "Online"
    assert data["transactionId"].startswith("TXN-")
    assert data["paidDate"] is not None


async def test_paying_paid_invoice_fails_and_changes_nothing(client: AsyncClient, admin, student):
    invoice = await issue(client, admin, student.profile_id)
    first = await client.post(
        f"/api/invoices/{invoice['id']}/pay",
        headers=student.headers,
        json={"paymentMethod": "UPI", "transactionId": "T-1"},
    )
    assert first.status_code == 200

    again = await client.post(
        f"/api/invoices/{invoice['id']}/pay",
        headers=student.headers,
        json={"paymentMethod": "Card", "transactionId": "T-2"},
    )
    assert again.status_code == 400

    current = await client.get(f"/api/invoices/{invoice['id']}", headers=student.headers)
    assert current.json()["paymentMethod"] == "UPI"
    assert current.json()["transactionId"] == "T-1"


async def test_paid_invoice_status_is_final(client: AsyncClient, admin, student):
    invoice = await issue(client, admin, student.profile_id)
    paid = await client.put(f"/api/invoices/{invoice['id']}/status", headers=admin.headers, json={"status": "Paid"})
    assert paid.status_code == 200

    reset = await client.put(f"/api/invoices/{invoice['id']}/status", headers=admin.headers, json={"status": "Pending"})
    assert reset.status_code == 400


async def test_overdue_cannot_be_set(client: AsyncClient, admin, student):
    invoice = await issue(client, admin, student.profile_id)
    response = await client.put(
        f"/api/invoices/{invoice['id']}/status",
        headers=admin.headers,
        json={"status": "Overdue"},
    )
    assert response.status_code == 400


async def test_overdue_is_derived(client: AsyncClient, admin, student):
    late = await issue(
        client,
        admin,
        student.profile_id,
        issueDate=(TODAY - timedelta(days=30)).isoformat(),
        dueDate=(TODAY - timedelta(days=1)).isoformat(),
    )
    await issue(client, admin, student.profile_id)
    assert late["status"] == "Overdue"

    overdue = await client.get("/api/invoices", params={"status": "Overdue"}, headers=admin.headers)
    assert [i["id"] for i in overdue.json()] == [late["id"]]

    pending = await client.get("/api/invoices", params={"status": "Pending"}, headers=admin.headers)
    assert late["id"] not in [i["id"] for i in pending.json()]

    # A late invoice can still be paid; afterwards it is simply Paid
    paid = await client.post(f"/api/invoices/{late['id']}/pay", headers=student.headers, json={})
    assert paid.json()["status"] == "Paid"


async def test_invoice_visibility(client: AsyncClient, admin, warden, student, other_block_student):
    mine = await issue(client, admin, student.profile_id)
    theirs = await issue(client, admin, other_block_student.profile_id)

    own = await client.get("/api/invoices/my-invoices", headers=student.headers)
    assert [i["id"] for i in own.json()] == [mine["id"]]

    block = await client.get("/api/invoices", headers=warden.headers)
    assert [i["id"] for i in block.json()] == [mine["id"]]

    by_student = await client.get(f"/api/invoices/student/{other_block_student.profile_id}", headers=warden.headers)
    assert by_student.status_code == 403

    foreign = await client.get(f"/api/invoices/{theirs['id']}", headers=student.headers)
    assert foreign.status_code == 403

    cannot_pay = await client.post(f"/api/invoices/{theirs['id']}/pay", headers=student.headers, json={})
    assert cannot_pay.status_code == 403


async def test_invoice_numbers_keep_counting_past_four_digits(client: AsyncClient, db_session, admin, student):
    for number in ("9999", "10000"):
        db_session.add(
            Invoice(
                invoice_number=f"INV-{TODAY.year}-{number}",
                student_id=student.profile_id,
                amount=100,
                items=[],
                issue_date=TODAY,
                due_date=TODAY,
                status=InvoiceStatus.PENDING,
            )
        )
    await db_session.commit()

    invoice = await issue(client, admin, student.profile_id)
    assert invoice["invoiceNumber"] == f"INV-{TODAY.year}-10001"
