from __future__ import annotations

T = {
    # reminders
    "start.ok": "✅ Water reminders started! I'll remind you every {timer} minutes to drink {amount}ml.",
    "start.error": "❌ Could not start reminders due to a server error.",
    "stop.ok": "⏹️ Water reminders stopped.",
    "stop.error": "❌ Could not stop reminders due to a server error.",
    "reminder.text": "💧 <b>Water Reminder!</b> 💧\nTime to drink {amount}ml of water!",
    "reminder.button": "💧 I Drank!",
    "reminder.completed": "✅ Completed",

    # settings
    "set.usage": "❌ Usage: /set &lt;timer minutes&gt; &lt;amount ml&gt;, e.g. /set 30 250",
    "set.not_positive": "❌ Timer and amount must be positive numbers!",
    "set.too_large": "❌ Timer can be at most {max_timer} minutes and amount at most {max_amount}ml!",
    "set.ok": "⚙️ Settings updated! Timer: {timer} minutes, Amount: {amount}ml",
    "set.error": "❌ Could not update settings due to a server error.",
    "setbmi.usage": "❌ Usage: /setbmi &lt;weight kg&gt; &lt;height cm&gt;, e.g. /setbmi 70 175",
    "setbmi.invalid": "❌ Please enter valid weight and height!",
    "setbmi.ok": (
        "✅ BMI info saved!\n"
        "📊 BMI: {bmi} ({category})\n"
        "💧 Recommended daily intake: {goal}ml ({goal_l}L)"
    ),
    "setbmi.error": "❌ Could not save BMI due to a server error.",

    # intake
    "add.usage": "❌ Usage: /add &lt;amount ml&gt;, e.g. /add 300",
    "add.not_positive": "❌ Amount must be positive!",
    "add.too_large": "❌ Amount can be at most {max_amount}ml!",
    "add.ok": "✅ Added {amount}ml to your water intake!",
    "add.error": "❌ Error adding water intake",
    "drink.not_yours": "This reminder is not for you!",
    "drink.ok": "✅ Great job! Logged {amount}ml of water.",
    "drink.duplicate": "This reminder is already logged.",
    "drink.malformed": "This button is no longer valid.",
    "drink.error": "❌ Error logging water intake",

    # stats
    "stats.usage": "❌ Usage: /stats [{periods}]",
    "stats.no_data": "No water intake data for {title}.",
    "stats.title": "💧 <b>Water Intake Stats - {title}</b>",
    "stats.total": "Total: {total}ml ({total_l}L)",
    "stats.average": "Average/Day: {average}ml",
    "stats.goal": "Daily Goal: {goal}ml",
    "stats.error": "❌ Could not fetch stats due to a server error.",

    # intake info
    "info.need_bmi": "❌ Please set your BMI first using /setbmi &lt;weight&gt; &lt;height&gt;",
    "info.title": "💧 <b>Your Water Intake Info</b>",
    "info.height": "📏 Height: {height}cm",
    "info.weight": "⚖️ Weight: {weight}kg",
    "info.bmi": "📊 BMI: {bmi} ({category})",
    "info.goal": "🎯 Daily Goal: {goal}ml ({goal_l}L)",
    "info.today": "💧 Today's Intake: {today}ml ({percentage}%)",
    "info.remaining": "📈 Remaining: {remaining}ml",
    "info.why": (
        "ℹ️ <b>Why This Amount?</b>\n"
        "Based on your body weight ({weight}kg), the recommended water intake is approximately "
        "33ml per kilogram of body weight per day. This helps maintain proper hydration for your body's needs."
    ),
    "info.error": "❌ Could not fetch water intake info due to a server error.",

    # donations
    "donate.intro": (
        "💝 <b>Support the Bot</b>\n\n"
        "Thank you for considering supporting this bot!\n\n"
        "Your donations help keep the bot running 24/7 and support future development.\n\n"
        "<b>Select a cryptocurrency below to view the donation address and QR code:</b>"
    ),
    "donate.title": "💰 <b>{name} Donation</b>",
    "donate.network": "<b>Network:</b> {network}",
    "donate.address": "<b>Address:</b>\n<code>{address}</code>",
    "donate.warning": "⚠️ <b>Important:</b> Make sure you're sending on the correct network!",
    "donate.scan": "📱 Scan the QR code above or copy the address.",
    "donate.copy": "Copy the address above to make your donation.",
    "donate.thanks": "Thank you for your support! ❤️",
    "donate.footer": "<i>Double-check the address before sending!</i>",
    "donate.unknown": "Unknown donation option.",

    # suggestions
    "suggest.usage": "❌ Usage: /suggest &lt;suggestion|issue&gt; &lt;your text&gt;",
    "suggest.ok": (
        "📬 <b>Suggestion Submitted</b>\n\n"
        "<b>Type:</b> {kind}\n"
        "<b>Submitted By:</b> {username}\n"
        "<b>Content:</b> {content}"
    ),
    "suggest.error": "❌ Could not save your suggestion.",

    # help
    "help.title": "📘 <b>Bot Help Menu</b>\n\nHere are all available commands:",
    "help.footer": "<i>Thanks for using the bot!</i>",
}

# command -> description, used for /help and the Telegram command menu
COMMANDS = [
    ("start", "Start water reminders"),
    ("stop", "Stop water reminders"),
    ("set", "Set timer & amount"),
    ("add", "Add manual water intake"),
    ("stats", "Show water stats with charts"),
    ("setbmi", "Set BMI data"),
    ("waterintakeinfo", "Show intake & BMI info"),
    ("donate", "Support the bot ❤️"),
    ("suggest", "Submit suggestions or issues"),
    ("help", "Show this help menu"),
]


def t(key: str, **kwargs) -> str:
    text = T.get(key, key)
    if kwargs:
        return text.format(**kwargs)
    return text
