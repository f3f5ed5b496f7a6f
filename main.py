import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.types import BotCommand
from sqlalchemy.exc import SQLAlchemyError

from waterbot import config
from waterbot.context import AppContext
from waterbot.database import init_db
from waterbot.handlers import start  # shared router, every handler module attaches to it
from waterbot.scheduler import ReminderScheduler
from waterbot.services.texts import COMMANDS

logger = logging.getLogger(__name__)


async def register_commands(bot: Bot) -> None:
    try:
        await bot.set_my_commands([BotCommand(command=name, description=desc) for name, desc in COMMANDS])
        logger.info("Registered %s bot commands", len(COMMANDS))
    except Exception as e:
        logger.error("Error registering commands: %s", e)


async def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("aiogram").setLevel(logging.INFO)

    if not config.TOKEN:
        logger.error("BOT_TOKEN not set in environment")
        sys.exit(1)
    if not config.DB_URL:
        logger.error("DB_URL not set in environment")
        sys.exit(1)

    try:
        sessions = init_db(config.DB_URL)
    except SQLAlchemyError as e:
        logger.error("Database connection error: %s", e)
        sys.exit(1)

    bot = Bot(
        token=config.TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    ctx = AppContext(bot=bot, sessions=sessions)
    ctx.scheduler = ReminderScheduler(ctx, interval_seconds=config.REMINDER_INTERVAL_SECONDS)

    dp = Dispatcher(ctx=ctx)
    dp.include_router(start.router)

    await register_commands(bot)
    ctx.scheduler.start()
    logger.info("Bot started")
    try:
        await dp.start_polling(bot)
    finally:
        ctx.scheduler.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
