import pytest

from tests.utils.clock import DAY, wall_clock_ms


@pytest.mark.asyncio
async def test_issue_invitation(client, auth, create_event):
    event = await create_event()
    expires_at = wall_clock_ms() + DAY

    response = await client.post(
        "/invitations",
        json={"event_id": event["id"], "uid": "walk-in", "expires_at": expires_at},
        headers=auth("organizer-1"),
    )

    assert response.status_code == 201
    invitation = response.json()
    assert invitation["status"] == "pending"
    assert invitation["uid"] == "walk-in"
    assert invitation["expires_at"] == expires_at

    listed = await client.get("/invitations", headers=auth("walk-in"))
    assert [inv["id"] for inv in listed.json()["invitations"]] == [invitation["id"]]


@pytest.mark.asyncio
async def test_second_pending_invitation_is_rejected(client, auth, create_event):
    event = await create_event()
    body = {"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() + DAY}

    first = await client.post("/invitations", json=body, headers=auth("organizer-1"))
    second = await client.post("/invitations", json=body, headers=auth("organizer-1"))

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "DUPLICATE_PENDING_INVITATION"


@pytest.mark.asyncio
async def test_new_invitation_after_decline(client, auth, create_event):
    event = await create_event()
    body = {"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() + DAY}
    first = (await client.post("/invitations", json=body, headers=auth("organizer-1"))).json()
    await client.post(
        f"/invitations/{first['id']}/decline",
        json={"event_id": event["id"]},
        headers=auth("walk-in"),
    )

    second = await client.post("/invitations", json=body, headers=auth("organizer-1"))

    assert second.status_code == 201


@pytest.mark.asyncio
async def test_issue_with_past_deadline(client, auth, create_event):
    event = await create_event()

    response = await client.post(
        "/invitations",
        json={"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() - 1},
        headers=auth("organizer-1"),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_DEADLINE"


@pytest.mark.asyncio
async def test_issue_by_non_organizer(client, auth, create_event):
    event = await create_event()

    response = await client.post(
        "/invitations",
        json={"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() + DAY},
        headers=auth("entrant-a"),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_responding_to_someone_elses_invitation(client, auth, create_event):
    event = await create_event()
    invitation = (
        await client.post(
            "/invitations",
            json={"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() + DAY},
            headers=auth("organizer-1"),
        )
    ).json()

    response = await client.post(
        f"/invitations/{invitation['id']}/accept",
        json={"event_id": event["id"]},
        headers=auth("entrant-a"),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_decline_twice_is_idempotent(client, auth, create_event):
    event = await create_event()
    invitation = (
        await client.post(
            "/invitations",
            json={"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() + DAY},
            headers=auth("organizer-1"),
        )
    ).json()
    url = f"/invitations/{invitation['id']}/decline"

    first = await client.post(url, json={"event_id": event["id"]}, headers=auth("walk-in"))
    second = await client.post(url, json={"event_id": event["id"]}, headers=auth("walk-in"))

    assert first.json()["changed"] is True
    assert second.status_code == 200
    assert second.json()["changed"] is False
    assert second.json()["invitation"]["status"] == "declined"


@pytest.mark.asyncio
async def test_cancelled_entrant_cannot_be_invited_again(client, auth, create_event):
    event = await create_event(sample_size=1)
    await client.post(f"/events/{event['id']}/waitlist", headers=auth("entrant-a"))
    await client.post(f"/events/{event['id']}/draw", headers=auth("organizer-1"))
    invitation = (await client.get("/invitations", headers=auth("entrant-a"))).json()[
        "invitations"
    ][0]
    await client.post(
        f"/invitations/{invitation['id']}/decline",
        json={"event_id": event["id"]},
        headers=auth("entrant-a"),
    )

    response = await client.post(
        "/invitations",
        json={"event_id": event["id"], "uid": "entrant-a", "expires_at": wall_clock_ms() + DAY},
        headers=auth("organizer-1"),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ENTRANT_CANCELLED"
    assert (await client.get("/invitations", headers=auth("entrant-a"))).json()[
        "invitations"
    ] == []
