from collections import UserDict

RINGQUEUE_BASE = {
    "MAX_STRING_LENGTH": 256,  # default buffer capacity for remove_head/remove_tail
}


class Settings(UserDict):
    def __init__(self):
        super().__init__()
        self.data.update(RINGQUEUE_BASE)

    def __getattr__(self, name):
        if name == "data":
            raise AttributeError(name)
        try:
            return self.data[name]
        except KeyError:
            raise AttributeError("setting not found")


settings = Settings()


def update_settings(new_settings):
    settings.update(new_settings)


def reset_settings():
    settings.clear()
    settings.update(RINGQUEUE_BASE)
