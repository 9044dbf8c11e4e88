import pytest

from tamatasker.buttons import DEFAULT_PHOTO_PATH
from tamatasker.callbacks import handle_callback, register_callbacks
from tamatasker.database import Database
from tamatasker.menu import MENU_TEXT
from tamatasker.telegram import Bot, CallbackQuery, Message

CHAT = 9


class FakeApi:
    def __init__(self):
        self.sent = []
        self.photos = []

    def send_message(self, chat_id, text, reply_markup=None):
        self.sent.append((chat_id, text, reply_markup))
        return {}

    def send_photo(self, chat_id, photo_path, caption="", reply_markup=None):
        self.photos.append((chat_id, photo_path, caption, reply_markup))
        return {}


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def bot(api):
    return Bot("token", api=api)


@pytest.fixture
def db():
    with Database(":memory:") as database:
        database.create_table()
        yield database


def make_query(data):
    return CallbackQuery(id="1", data=data, message=Message(message_id=1, chat_id=CHAT))


@pytest.mark.parametrize(
    "data, text",
    [
        ("doSmthng", "Something is happened"),
        ("goback", MENU_TEXT),
        ("addNewTask", "Enter new task: "),
        ("activeTasks", "Current active tasks: "),
    ],
)
def test_buttons_send_their_message(bot, api, db, data, text):
    assert handle_callback(bot, db, make_query(data)) is True
    assert api.sent[-1][:2] == (CHAT, text)


def test_send_pic_button(bot, api, db):
    assert handle_callback(bot, db, make_query("sendPicButton")) is True
    assert api.photos[0][:2] == (CHAT, DEFAULT_PHOTO_PATH)
    assert api.sent == []


def test_add_new_task_stores_task(bot, db):
    handle_callback(bot, db, make_query("addNewTask"))
    assert [t.task for t in db.show_active_tasks(CHAT)] == ["waiting"]


def test_unknown_button(bot, api, db):
    assert handle_callback(bot, db, make_query("nothing")) is False
    assert api.sent == [] and api.photos == []


def test_query_without_message(bot, api, db):
    query = CallbackQuery(id="1", data="doSmthng", message=None)
    assert handle_callback(bot, db, query) is False
    assert api.sent == []


def test_register_callbacks_dispatch(bot, api, db):
    register_callbacks(bot, db)
    update = {
        "update_id": 5,
        "callback_query": {
            "id": "abc",
            "data": "doSmthng",
            "message": {"message_id": 2, "chat": {"id": CHAT}, "date": 0},
        },
    }
    assert bot.events.dispatch(update) is True
    assert api.sent[0][:2] == (CHAT, "Something is happened")