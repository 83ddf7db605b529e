import pytest
from sqlalchemy import select

from pieces_core import ActionContext, ValidationError
from pieces_saints.db import messages_table


def ctx(auth, users, **extra):
    return ActionContext(
        auth=auth,
        props_value={"users": users, "messageId": 2, "campaignId": "camp-1", **extra},
    )


@pytest.mark.asyncio
async def test_inserts_one_message_per_user(piece, engine, auth):
    count = await piece.run_action(
        "sendInAppMessages", ctx(auth, [{"id": 1, "platform": "android"}, {"id": 3}])
    )

    assert count == 2
    async with engine.connect() as conn:
        rows = (
            await conn.execute(select(messages_table).order_by(messages_table.c.user_id))
        ).mappings().all()
    assert [r["user_id"] for r in rows] == [1, 3]
    assert {r["content_id"] for r in rows} == {2}
    assert {r["campaign_id"] for r in rows} == {"camp-1"}
    assert all(r["delivered_at"] is None and r["readed_at"] is None for r in rows)
    assert all(r["created_at"] is not None for r in rows)


@pytest.mark.asyncio
async def test_empty_user_list_inserts_nothing(unreachable_piece, auth):
    assert await unreachable_piece.run_action("sendInAppMessages", ctx(auth, [])) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("users", [{"id": 1}, [{"name": "no id"}], ["1"]])
async def test_malformed_users_rejected(unreachable_piece, auth, users):
    with pytest.raises(ValidationError):
        await unreachable_piece.run_action("sendInAppMessages", ctx(auth, users))


@pytest.mark.asyncio
async def test_campaign_id_required(unreachable_piece, auth):
    with pytest.raises(ValidationError):
        await unreachable_piece.run_action(
            "sendInAppMessages",
            ActionContext(auth=auth, props_value={"users": [{"id": 1}], "messageId": 1}),
        )


@pytest.mark.asyncio
async def test_non_integer_user_id_rejected_before_connecting(unreachable_piece, auth):
    with pytest.raises(ValidationError) as exc_info:
        await unreachable_piece.run_action("sendInAppMessages", ctx(auth, [{"id": "abc"}]))
    assert "users[0].id" in exc_info.value.errors


@pytest.mark.asyncio
async def test_non_integer_message_id_rejected_before_connecting(unreachable_piece, auth):
    with pytest.raises(ValidationError) as exc_info:
        await unreachable_piece.run_action(
            "sendInAppMessages", ctx(auth, [{"id": 1}], messageId="welcome")
        )
    assert "messageId" in exc_info.value.errors


@pytest.mark.asyncio
async def test_numeric_string_ids_are_accepted(piece, engine, auth):
    count = await piece.run_action(
        "sendInAppMessages", ctx(auth, [{"id": "2"}], messageId="1")
    )

    assert count == 1
    async with engine.connect() as conn:
        row = (await conn.execute(select(messages_table))).mappings().one()
    assert (row["user_id"], row["content_id"]) == (2, 1)
