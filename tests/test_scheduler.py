from datetime import timedelta

from waterbot.context import AppContext
from waterbot.scheduler import ReminderScheduler
from waterbot.services.reminders import is_due
from waterbot.services.users import get_settings, start_reminders, stop_reminders, update_reminder_settings
from tests.conftest import NOW, FakeBot


def test_is_due():
    assert is_due(None, 30, NOW) is True
    assert is_due(NOW - timedelta(minutes=31), 30, NOW) is True
    assert is_due(NOW - timedelta(minutes=30), 30, NOW) is True
    assert is_due(NOW - timedelta(minutes=10), 30, NOW) is False


def _active_user(sessions, user_id, timer=30, amount=250, last_reminder=None):
    with sessions() as session:
        update_reminder_settings(session, user_id, timer, amount)
        settings = start_reminders(session, user_id)
        settings.last_reminder = last_reminder
        session.commit()


async def test_cycle_reminds_only_due_users(ctx, sessions, bot):
    _active_user(sessions, "1", last_reminder=NOW - timedelta(minutes=31))
    _active_user(sessions, "2", last_reminder=NOW - timedelta(minutes=10))
    _active_user(sessions, "3", amount=400)
    _active_user(sessions, "4")
    with sessions() as session:
        stop_reminders(session, "4")

    result = await ReminderScheduler(ctx).run_cycle()

    assert (result.checked, result.sent, result.failed) == (3, 2, 0)
    assert sorted(m.chat_id for m in bot.sent) == [1, 3]
    sent_to_3 = next(m for m in bot.sent if m.chat_id == 3)
    assert "400ml" in sent_to_3.text
    button = sent_to_3.reply_markup.inline_keyboard[0][0]
    assert button.callback_data == "drink:3:400"

    with sessions() as session:
        assert get_settings(session, "1").last_reminder == NOW
        assert get_settings(session, "2").last_reminder == NOW - timedelta(minutes=10)
        assert get_settings(session, "3").last_reminder == NOW
        assert get_settings(session, "4").last_reminder is None


async def test_delivery_failure_does_not_stop_cycle(sessions, clock):
    bot = FakeBot(fail_for={1})
    ctx = AppContext(bot=bot, sessions=sessions, clock=clock)
    _active_user(sessions, "1")
    _active_user(sessions, "2")

    result = await ReminderScheduler(ctx).run_cycle()

    assert (result.sent, result.failed) == (1, 1)
    assert [m.chat_id for m in bot.sent] == [2]
    with sessions() as session:
        # still due next cycle
        assert get_settings(session, "1").last_reminder is None
        assert get_settings(session, "2").last_reminder == NOW


async def test_reminder_repeats_after_timer(ctx, sessions, bot, clock):
    _active_user(sessions, "1", timer=30)
    scheduler = ReminderScheduler(ctx)

    await scheduler.run_cycle()
    clock.current = NOW + timedelta(minutes=20)
    await scheduler.run_cycle()
    clock.current = NOW + timedelta(minutes=30)
    await scheduler.run_cycle()

    assert len(bot.sent) == 2


async def test_cycle_survives_database_errors(ctx, sessions, monkeypatch):
    from sqlalchemy.exc import OperationalError

    def broken(session):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr("waterbot.scheduler.get_active_reminders", broken)
    result = await ReminderScheduler(ctx).run_cycle()
    assert (result.checked, result.sent, result.failed) == (0, 0, 0)


class SlowBot(FakeBot):
    """Each send takes a minute of fake time."""

    def __init__(self, clock):
        super().__init__()
        self.clock = clock

    async def send_message(self, chat_id, text, reply_markup=None, **kwargs):
        self.clock.current += timedelta(minutes=1)
        return await super().send_message(chat_id, text, reply_markup=reply_markup, **kwargs)


async def test_cycle_stamps_every_user_with_cycle_start(sessions, clock):
    ctx = AppContext(bot=SlowBot(clock), sessions=sessions, clock=clock)
    _active_user(sessions, "1")
    _active_user(sessions, "2")

    result = await ReminderScheduler(ctx).run_cycle()

    assert result.sent == 2
    assert clock.current == NOW + timedelta(minutes=2)
    with sessions() as session:
        assert get_settings(session, "1").last_reminder == NOW
        assert get_settings(session, "2").last_reminder == NOW
