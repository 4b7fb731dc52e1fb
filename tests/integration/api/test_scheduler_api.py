from uuid import UUID

import pytest
from sqlmodel import select

from src.domain.entities import Invitation, NotificationKind, WaitlistEntry
from tests.utils.clock import DAY, HOUR, wall_clock_ms


@pytest.mark.asyncio
async def test_scheduler_requires_api_key(client):
    missing = await client.post("/scheduler/selections")
    wrong = await client.post(
        "/scheduler/selections", headers={"X-Admin-API-Key": "not-the-key"}
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401


@pytest.mark.asyncio
async def test_selection_sweep_draws_closed_events(
    client, auth, admin_headers, create_event, db_session, notifier
):
    now = wall_clock_ms()
    closed = await create_event(
        sample_size=1,
        registration_start=now - 2 * DAY,
        registration_end=now - HOUR,
    )
    still_open = await create_event()
    for uid in ["entrant-a", "entrant-b"]:
        db_session.add(WaitlistEntry(event_id=UUID(closed["id"]), uid=uid, joined_at=now))
    await db_session.commit()

    response = await client.post("/scheduler/selections", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"processed": [closed["id"]], "failures": []}

    detail = (await client.get(f"/events/{closed['id']}")).json()
    assert detail["selection_processed"] is True
    assert detail["waitlist_count"] == 2
    untouched = (await client.get(f"/events/{still_open['id']}")).json()
    assert untouched["selection_processed"] is False
    assert notifier.sent[-1]["kind"] == NotificationKind.selected

    again = await client.post("/scheduler/selections", headers=admin_headers)
    assert again.json()["processed"] == []


@pytest.mark.asyncio
async def test_expiration_sweep(client, auth, admin_headers, create_event, db_session):
    event = await create_event()
    await client.post(f"/events/{event['id']}/waitlist", headers=auth("entrant-a"))
    await client.post(f"/events/{event['id']}/draw", headers=auth("organizer-1"))

    result = await db_session.execute(
        select(Invitation).where(Invitation.event_id == UUID(event["id"]))
    )
    invitation = result.scalar_one()
    invitation.expires_at = wall_clock_ms() - 1
    db_session.add(invitation)
    await db_session.commit()
    invitation_id = str(invitation.id)

    response = await client.post("/scheduler/expirations", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["processed"] == [invitation_id]

    partition = (
        await client.get(f"/events/{event['id']}/entrants", headers=auth("organizer-1"))
    ).json()
    assert partition["selected"] == []
    assert partition["cancelled"] == ["entrant-a"]

    listed = await client.get("/invitations", headers=auth("entrant-a"))
    assert listed.json()["invitations"] == []

    again = await client.post("/scheduler/expirations", headers=admin_headers)
    assert again.json()["processed"] == []


@pytest.mark.asyncio
async def test_manual_expire_before_deadline(client, auth, admin_headers, create_event):
    event = await create_event()
    invitation = (
        await client.post(
            "/invitations",
            json={"event_id": event["id"], "uid": "walk-in", "expires_at": wall_clock_ms() + DAY},
            headers=auth("organizer-1"),
        )
    ).json()

    response = await client.post(
        f"/scheduler/invitations/{invitation['id']}/expire", headers=admin_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVITATION_NOT_EXPIRED"


@pytest.mark.asyncio
async def test_accepting_past_deadline_expires_invitation(
    client, auth, create_event, db_session
):
    event = await create_event()
    await client.post(f"/events/{event['id']}/waitlist", headers=auth("entrant-a"))
    await client.post(f"/events/{event['id']}/draw", headers=auth("organizer-1"))

    result = await db_session.execute(
        select(Invitation).where(Invitation.event_id == UUID(event["id"]))
    )
    invitation = result.scalar_one()
    invitation.expires_at = wall_clock_ms() - 1
    db_session.add(invitation)
    await db_session.commit()

    response = await client.post(
        f"/invitations/{invitation.id}/accept",
        json={"event_id": event["id"]},
        headers=auth("entrant-a"),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVITATION_EXPIRED"
    detail = (await client.get(f"/events/{event['id']}")).json()
    assert detail["admitted_count"] == 0


@pytest.mark.asyncio
async def test_sorry_notifications_sent_once(
    client, auth, admin_headers, create_event, notifier
):
    now = wall_clock_ms()
    event = await create_event(sample_size=1, starts_at_epoch_ms=now + 2 * DAY - HOUR)
    for uid in ["entrant-a", "entrant-b"]:
        await client.post(f"/events/{event['id']}/waitlist", headers=auth(uid))
    draw = (
        await client.post(f"/events/{event['id']}/draw", headers=auth("organizer-1"))
    ).json()

    response = await client.post("/scheduler/sorry-notifications", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["processed"] == [event["id"]]
    sorry = notifier.sent[-1]
    assert sorry["kind"] == NotificationKind.not_selected
    assert sorry["recipient_uids"] == draw["non_selected"]

    again = await client.post("/scheduler/sorry-notifications", headers=admin_headers)
    assert again.json()["processed"] == []
    assert len(
        [n for n in notifier.sent if n["kind"] == NotificationKind.not_selected]
    ) == 1


@pytest.mark.asyncio
async def test_sorry_notifications_wait_for_window(
    client, auth, admin_headers, create_event
):
    event = await create_event()
    await client.post(f"/events/{event['id']}/draw", headers=auth("organizer-1"))

    response = await client.post("/scheduler/sorry-notifications", headers=admin_headers)

    assert response.json()["processed"] == []
