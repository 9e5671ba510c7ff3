from rich.console import Console
from rich.pretty import pprint

from courier import *


@register(namespace=["Api", "AppName", "V1"])
class Authenticate(CommandCallable):
    def __init__(self, email, password):
        self.email = email
        self.password = password

    def call(self):
        if self.password != "secret":
            self.errors.add("password", "is invalid")
            return None
        return {"email": self.email}


if __name__ == '__main__':
    pprint(dispatch("authenticate", "/api/app_name/v1", {"email": "a@b.com", "password": "secret"}, {"camelize": True}))
    pprint(dispatch("Authenticate", "Api::AppName::V1", ["a@b.com", "guess"]))

    try:
        dispatch("BadCommand", ["Api", "AppName", "V1"])
    except DispatchException as fault:
        Console(stderr=True).print(fault)
