import pytest
from httpx import AsyncClient
from sqlmodel import select


@pytest.mark.asyncio
async def test_submit_contact_message(client: AsyncClient, test_data, session_factory):
    from travelcraft.domain.entities import ContactMessage

    payload = test_data.contact()
    response = await client.post("/api/contact", json=payload)

    assert response.status_code == 200
    assert response.json() == {"message": "Message sent successfully!"}

    async with session_factory() as db:
        stored = (await db.exec(select(ContactMessage))).all()
    assert len(stored) == 1
    assert stored[0].subject == payload["subject"]


@pytest.mark.asyncio
async def test_contact_requires_all_fields(client: AsyncClient, test_data):
    payload = test_data.contact()
    payload["subject"] = ""

    response = await client.post("/api/contact", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_FIELDS"
