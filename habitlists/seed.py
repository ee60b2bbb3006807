import os
import random
import logging
import calendar
from datetime import date

from habitlists.store import Store

log = logging.getLogger(__name__)

PALETTE = [
    ("red", "#f5716e"),
    ("orange", "#fb933c"),
    ("yellow", "#fbbf23"),
    ("yellow2", "#facc16"),
    ("lime", "#a3e636"),
    ("green", "#4ade80"),
    ("green2", "#34d399"),
    ("teal", "#2dd4c0"),
    ("cyan", "#21d3cd"),
    ("blue", "#38bbfb"),
    ("blue2", "#61a5fa"),
    ("indigo", "#818cf8"),
    ("purple", "#a78bfa"),
    ("purple2", "#c085fd"),
]

SAMPLE_LISTS = [
    ("\U0001f9fe Shopping List", 10, [
        "\U0001f95b Milk",
        "\U0001f35e Bread",
        "\U0001f950 ~Quaso~",
    ]),
    ("\U0001f37f Movies", 6, [
        "\U0001f47d Alien (1979)",
        "\U0001f52b Aliens (1986)",
        "⚰️ Alien³ (1992)",
        "\U0001f9ec Alien: Resurrection (1997)",
        "\U0001f5ff Prometheus (2012)",
        "\U0001f916 Alien: Covenant (2017)",
        "\U0001f573️ Alien: Romulus (2025)",
    ]),
]

SAMPLE_HABITS = [
    ("Reinforcement Learning", 6),
    ("Robotics", 10),
]

MAX_SAMPLE_DAYS = 30


def random_day(rng, today=None):
    """Return a random DD/MM/YYYY date within the current year, never after `today`."""
    today = today or date.today()
    month = rng.randint(1, today.month)
    last = calendar.monthrange(today.year, month)[1]
    if month == today.month:
        last = today.day
    return f"{rng.randint(1, last):02d}/{month:02d}/{today.year}"


def seed_database(store, rng=None, today=None):
    """Insert the color palette plus sample lists and habits."""
    rng = rng or random.Random()
    for name, value in PALETTE:
        store.add_color(name, value)

    for name, color, texts in SAMPLE_LISTS:
        lst = store.add_list(name, color)
        log.info("Sample list created: %s", lst)
        if lst:
            for text in texts:
                store.add_entry(lst["list_id"], text)

    for name, color in SAMPLE_HABITS:
        habit = store.add_habit(name, color)
        log.info("Sample habit created: %s", habit)
        if habit:
            for _ in range(rng.randint(1, MAX_SAMPLE_DAYS)):
                store.add_day(habit["habit_id"], random_day(rng, today))

    log.info("Seeded database with sample data.")


def is_fresh(path):
    return path == ":memory:" or not os.path.exists(path)


def open_store(path, seed=True):
    """Open the store at `path`, seeding it only if the file did not exist yet."""
    fresh = is_fresh(path)
    store = Store(path)
    if fresh and seed:
        seed_database(store)
    return store
