#!/usr/bin/env python3
"""
Check the bot's environment before deploying.
Prints what is configured and probes Telegram and the database.
"""

import os

import requests
from dotenv import load_dotenv
from sqlalchemy import create_engine, text

load_dotenv()

print("🔍 Environment check:")
print("=" * 50)

bot_token = os.getenv("BOT_TOKEN")
if bot_token:
    print(f"✅ BOT_TOKEN: {bot_token[:10]}... (found)")
else:
    print("❌ BOT_TOKEN: NOT FOUND!")
    print("   Add BOT_TOKEN to the environment or to .env")

db_url = os.getenv("DB_URL")
if db_url:
    print(f"✅ DB_URL: {db_url}")
else:
    print("❌ DB_URL: NOT FOUND!")
    print("   Add DB_URL to the environment or to .env, e.g. sqlite:///waterbot.db")
print(f"⏱️ REMINDER_INTERVAL_SECONDS: {os.getenv('REMINDER_INTERVAL_SECONDS', '60')}")

print("\n🌐 Telegram API:")
try:
    if bot_token:
        response = requests.get(f"https://api.telegram.org/bot{bot_token}/getMe", timeout=5)
        if response.ok and response.json().get("ok"):
            print(f"✅ Token accepted, bot is @{response.json()['result']['username']}")
        else:
            print(f"❌ Token rejected: {response.text}")
    else:
        requests.get("https://api.telegram.org", timeout=5)
        print("✅ Telegram API reachable")
except requests.RequestException as e:
    print(f"❌ Could not reach Telegram API: {e}")

print("\n🗄️ Database:")
if not db_url:
    print("⏭️ Skipped, DB_URL not set")
else:
    try:
        engine = create_engine(db_url)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Database connection failed: {e}")

if not bot_token or not db_url:
    print("\n⚠️  Without BOT_TOKEN and DB_URL the bot will not start!")
    print("   Get a token from @BotFather in Telegram")
