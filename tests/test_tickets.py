# tests/test_tickets.py
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

TICKET = {"message": "Broken street light", "latitude": 12.345678, "longitude": 25.579135}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_create_and_get_ticket():
    r = client.post("/tickets", json=TICKET)
    assert r.status_code == 201
    tid = r.json()["id"]

    r2 = client.get(f"/tickets/{tid}")
    assert r2.status_code == 200
    data = r2.json()
    assert data["message"] == "Broken street light"
    assert data["latitude"] == 12.345678
    assert data["longitude"] == 25.579135
    assert data["status"] == "NEW"
    assert data["images"] == []


def test_list_returns_array():
    r = client.get("/tickets")
    assert r.status_code == 200
    assert isinstance(r.json(), list)


def test_update_ticket_message_and_status():
    # create
    r = client.post("/tickets", json={**TICKET, "message": "To Update"})
    assert r.status_code == 201
    tid = r.json()["id"]

    # update message + status
    r2 = client.put(f"/tickets/{tid}", json={"message": "Updated", "status": "IN_PROGRESS"})
    assert r2.status_code == 200
    data = r2.json()
    assert data["id"] == tid
    assert data["message"] == "Updated"
    assert data["status"] == "IN_PROGRESS"
    assert data["latitude"] == TICKET["latitude"]

    # fetch again to be sure
    r3 = client.get(f"/tickets/{tid}")
    assert r3.status_code == 200
    assert r3.json()["status"] == "IN_PROGRESS"


def test_update_unknown_status_is_rejected():
    tid = client.post("/tickets", json=TICKET).json()["id"]
    r = client.put(f"/tickets/{tid}", json={"status": "open"})
    assert r.status_code == 422


def test_delete_ticket_then_404():
    # create
    r = client.post("/tickets", json={**TICKET, "message": "To Delete"})
    assert r.status_code == 201
    tid = r.json()["id"]

    # delete
    r2 = client.delete(f"/tickets/{tid}")
    assert r2.status_code == 200
    assert r2.json()["id"] == tid

    # now 404
    r3 = client.get(f"/tickets/{tid}")
    assert r3.status_code == 404
    assert r3.json()["detail"] == "Ticket not found"


def test_get_not_found_returns_404():
    # very large id that likely doesn't exist
    r = client.get("/tickets/9999999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Ticket not found"


def test_create_validation_errors():
    # missing message
    r1 = client.post("/tickets", json={"latitude": 1.0, "longitude": 1.0})
    assert r1.status_code == 422

    # missing coordinates
    r2 = client.post("/tickets", json={"message": "no location"})
    assert r2.status_code == 422

    # empty message (fails min_length=1)
    r3 = client.post("/tickets", json={**TICKET, "message": ""})
    assert r3.status_code == 422

    # latitude out of range
    r4 = client.post("/tickets", json={**TICKET, "latitude": 91})
    assert r4.status_code == 422


def test_filter_by_status_new_only():
    # create two tickets
    a = client.post("/tickets", json={**TICKET, "message": "A"}).json()
    b = client.post("/tickets", json={**TICKET, "message": "B"}).json()

    # close one of them
    client.put(f"/tickets/{b['id']}", json={"status": "CLOSED"})

    # fetch only new
    r = client.get("/tickets?status=NEW")
    assert r.status_code == 200
    ids = {t["id"] for t in r.json()}
    # 'a' should be present, 'b' should not
    assert a["id"] in ids
    assert b["id"] not in ids


def test_update_with_nulls_keeps_fields():
    tid = client.post("/tickets", json={**TICKET, "message": "Keep me"}).json()["id"]

    r = client.put(f"/tickets/{tid}", json={"message": None, "status": None})
    assert r.status_code == 200
    data = r.json()
    assert data["message"] == "Keep me"
    assert data["status"] == "NEW"


def test_update_and_delete_unknown_ticket_return_404():
    r1 = client.put("/tickets/9999999", json={"message": "x"})
    assert r1.status_code == 404
    assert r1.json()["detail"] == "Ticket not found"

    r2 = client.delete("/tickets/9999999")
    assert r2.status_code == 404
    assert r2.json()["detail"] == "Ticket not found"
