from __future__ import annotations

import base64


def basic_auth_header(login: str, password: str = "") -> str:
    credentials = f"{login}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")
