def book(client, date="2024-06-10", time="10:00", **extra):
    payload = {
        "client_name": "Ana",
        "client_phone": "(11) 98765-4321",
        "appointment_date": date,
        "appointment_time": time,
        **extra,
    }
    return client.post("/api/appointments", json=payload)


def test_available_slots_for_future_date(client):
    book(client, time="10:00")
    response = client.get("/api/available-slots", params={"date": "2024-06-10", "service_id": 1})

    assert response.status_code == 200
    slots = response.json()
    assert "10:00" not in slots
    assert slots[0] == "09:00"
    assert slots == sorted(slots)
    assert len(slots) == 9


def test_available_slots_today_applies_margin(client, fake_time):
    fake_time.set_local(13, 45)
    slots = client.get("/api/available-slots", params={"date": "2024-06-01"}).json()
    assert slots == ["15:00", "16:00", "17:00", "18:00"]


def test_today_slots(client, fake_time):
    fake_time.set_local(13, 15)
    book(client, date="2024-06-01", time="16:00")

    body = client.get("/api/today-slots").json()

    assert body == {
        "date": "2024-06-01",
        "slots": ["14:00", "15:00", "17:00", "18:00"],
        "total": 10,
        "available": 4,
    }


def test_booking_returns_receipt_without_personal_data(client, service_id):
    response = book(client, service_id=service_id, client_cpf="529.982.247-25")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["status"] == "pending"
    assert body["appointment_time"] == "10:00"
    assert "client_phone" not in body and "client_cpf" not in body


def test_double_booking_rejected(client):
    assert book(client).status_code == 200

    second = book(client, client_name="Bia", time="10:00:00")
    assert second.status_code == 400
    assert second.json() == {"error": "Time slot not available"}


def test_booking_validation(client):
    assert book(client, date="10/06/2024").status_code == 400
    assert book(client, time="10h").status_code == 400
    assert book(client, client_cpf="123.456.789-00").status_code == 400
    assert book(client, service_id=999).status_code == 404


def test_admin_lists_masked_online_appointments(admin):
    book(admin, client_cpf="529.982.247-25")

    rows = admin.get("/api/admin/online-appointments").json()

    assert len(rows) == 1
    assert rows[0]["client_phone"] == "(**) *****-4321"
    assert rows[0]["client_cpf"] == "***.982.***-**"


def test_confirm_cancel_and_reminders(admin):
    appointment_id = book(admin, date="2024-06-02", time="11:00").json()["id"]
    book(admin, date="2024-06-02", time="09:00")

    confirmed = admin.put(f"/api/admin/online-appointments/{appointment_id}/confirm")
    assert confirmed.json() == {"success": True, "id": appointment_id}

    reminders = admin.get("/api/admin/reminders").json()
    assert [r["id"] for r in reminders] == [appointment_id]
    assert reminders[0]["client_phone"] == "(**) *****-4321"

    admin.put(f"/api/admin/online-appointments/{appointment_id}/reminder-sent")
    assert admin.get("/api/admin/reminders").json() == []

    admin.put(f"/api/admin/online-appointments/{appointment_id}/cancel")
    assert "11:00" in admin.get("/api/available-slots", params={"date": "2024-06-02"}).json()

    assert admin.put("/api/admin/online-appointments/999/confirm").status_code == 404


def test_manual_appointments(admin):
    client_id = admin.post("/api/admin/clients", json={"name": "Ana", "phone": "11987654321"}).json()["id"]

    created = admin.post("/api/admin/appointments", json={
        "client_id": client_id,
        "appointment_date": "2024-06-10",
        "appointment_time": "15:00",
        "notes": "retoque",
    })
    assert created.status_code == 200
    appointment_id = created.json()["id"]

    assert book(admin, time="15:00").status_code == 400

    rows = admin.get("/api/admin/appointments").json()
    assert rows[0]["client_name"] == "Ana"
    assert rows[0]["client_phone"] == "(**) *****-4321"

    assert admin.delete(f"/api/admin/appointments/{appointment_id}").json() == {"success": True, "message": None}
    assert book(admin, time="15:00").status_code == 200


def test_impossible_date_and_time_rejected(admin):
    assert book(admin, date="2024-13-45").status_code == 400
    assert book(admin, time="99:99").status_code == 400
    assert admin.get("/api/admin/online-appointments").json() == []

    manual = admin.post("/api/admin/appointments", json={
        "appointment_date": "2024-02-30",
        "appointment_time": "10:00",
    })
    assert manual.status_code == 400
    assert "Invalid date" in manual.json()["error"]


def test_manual_appointment_status_changes(admin):
    appointment_id = admin.post("/api/admin/appointments", json={
        "appointment_date": "2024-06-10",
        "appointment_time": "15:00",
    }).json()["id"]

    cancelled = admin.put(f"/api/admin/appointments/{appointment_id}/status", json={"status": "cancelled"})
    assert cancelled.json() == {"success": True, "id": appointment_id}
    assert "15:00" in admin.get("/api/available-slots", params={"date": "2024-06-10"}).json()

    admin.put(f"/api/admin/appointments/{appointment_id}/status", json={"status": "done"})
    assert "15:00" not in admin.get("/api/available-slots", params={"date": "2024-06-10"}).json()
    assert admin.get("/api/admin/appointments").json()[0]["status"] == "done"

    assert admin.put(f"/api/admin/appointments/{appointment_id}/status", json={"status": "lost"}).status_code == 400
    assert admin.put("/api/admin/appointments/999/status", json={"status": "done"}).status_code == 404
