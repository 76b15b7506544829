"""Credential carrier cookies.

Both cookies are ``Path=/``, ``HttpOnly`` and, when ``secure`` is on,
``Secure; SameSite=None`` so the cross-origin front end can send them.
With ``secure`` off (local HTTP development) SameSite falls back to
``Lax``, since browsers drop ``SameSite=None`` cookies that are not Secure.
"""

from typing import Literal

from fastapi import Request, Response


class CookieCarrier:
    """Reads and writes the session and trial cookies.

    Cookie names and the Secure flag are fixed at construction; the
    container builds the instance from settings.

    Example:
        >>> carrier = CookieCarrier(session_name="sess", trial_name="trial")
        >>> carrier.set_session(response, token, max_age=2592000)
    """

    def __init__(
        self,
        *,
        session_name: str,
        trial_name: str,
        secure: bool = True,
    ) -> None:
        self.session_name = session_name
        self.trial_name = trial_name
        self.secure = secure

    @property
    def samesite(self) -> Literal["none", "lax"]:
        return "none" if self.secure else "lax"

    def session_token(self, request: Request) -> str | None:
        return request.cookies.get(self.session_name)

    def trial_token(self, request: Request) -> str | None:
        return request.cookies.get(self.trial_name)

    def set_session(self, response: Response, token: str, max_age: int) -> None:
        self._set(response, self.session_name, token, max_age)

    def clear_session(self, response: Response) -> None:
        self._clear(response, self.session_name)

    def set_trial(self, response: Response, token: str, max_age: int) -> None:
        self._set(response, self.trial_name, token, max_age)

    def clear_trial(self, response: Response) -> None:
        self._clear(response, self.trial_name)

    def _set(self, response: Response, key: str, value: str, max_age: int) -> None:
        response.set_cookie(
            key=key,
            value=value,
            max_age=max_age,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )

    def _clear(self, response: Response, key: str) -> None:
        response.delete_cookie(
            key=key,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )
