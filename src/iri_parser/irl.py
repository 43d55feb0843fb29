"""Internationalized Resource Locators

An IRL is the Unicode view of a URL: the host is IDNA-decoded and the path,
query and fragment are percent-decoded, while the ASCII-safe `yarl.URL` it was
derived from stays available as `Irl.url`.

    >>> irl = Irl("https://xn--alayan-vua36b.info/r%C3%A9sum%C3%A9")
    >>> irl.host
    'çağlayan.info'
    >>> irl.url.raw_host
    'xn--alayan-vua36b.info'
    >>> irl.pathname
    '/résumé'
"""

import re
from ipaddress import ip_address
from typing import Any, Optional, Tuple
from urllib.parse import unquote_to_bytes

import idna
from yarl import URL

from .errors import InvalidBaseError, LocatorError, PercentDecodingError
from .kind import IriKind

_PCT_ENCODED_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

_FIELDS = ("protocol", "username", "password", "hostname", "port", "host",
           "origin", "pathname", "search", "hash", "href")


def percent_decode(component: str) -> str:
    """Decode every %XX escape of a URI component as UTF-8

    Raises `PercentDecodingError` on a "%" that does not start an escape or on
    escapes that are not valid UTF-8.
    """
    if _STRAY_PERCENT.search(component):
        raise PercentDecodingError(component)

    def _decode_run(match: "re.Match[str]") -> str:
        return unquote_to_bytes(match.group()).decode("utf-8")

    try:
        return _PCT_ENCODED_RUN.sub(_decode_run, component)
    except UnicodeDecodeError as e:
        raise PercentDecodingError(component) from e


def _unicode_hostname(raw_host: Optional[str]) -> str:
    if not raw_host:
        return ""
    if ":" in raw_host:
        return f"[{raw_host}]"
    try:
        ip_address(raw_host)
    except ValueError:
        pass
    else:
        # IP addresses are never IDNA encoded
        return raw_host
    try:
        return idna.decode(raw_host)
    except idna.IDNAError:
        # Labels outside IDNA 2008, such as "my_host", are left as they are
        return raw_host


def _parse(value: Any, base: Any) -> URL:
    base_url = None
    if base is not None:
        try:
            base_url = URL(str(base))
        except (TypeError, ValueError, UnicodeError) as e:
            raise InvalidBaseError(value, base) from e
        if not base_url.scheme:
            raise InvalidBaseError(value, base)

    try:
        url = URL(str(value))
        if base_url is not None:
            url = base_url.join(url)
    except (TypeError, ValueError, UnicodeError) as e:
        raise LocatorError(value, base) from e

    if not url.scheme:
        raise LocatorError(value, base, reason="relative reference without a base")
    return url


class Irl:
    """A Unicode-aware URL

    Field names and formats follow the WHATWG URL API: `protocol` ends in
    ":", `search` and `hash` keep their leading "?" and "#" and are empty when
    absent, and `port` is empty for the scheme's default port.
    """

    __slots__ = ("url",) + tuple(f"_{name}" for name in _FIELDS)

    def __init__(self, value: Any, base: Any = None, *, strict_decoding: bool = True):
        """Parse `value`, resolving it against `base` when given

        Raises `LocatorError` when the base or the value cannot be parsed, or
        when a component holds an escape that does not decode. With
        `strict_decoding=False` such a component keeps its encoded form.
        """
        url = _parse(value, base)

        def decode(component: str) -> str:
            try:
                return percent_decode(component)
            except PercentDecodingError as e:
                if not strict_decoding:
                    return component
                raise PercentDecodingError(component, value, base) from e

        protocol = f"{url.scheme}:"
        username = url.raw_user or ""
        password = url.raw_password or ""
        hostname = _unicode_hostname(url.raw_host)
        port = url.explicit_port
        port = "" if port is None or url.is_default_port() else str(port)
        host = f"{hostname}:{port}" if port else hostname
        pathname = decode(url.raw_path)
        search = decode(f"?{url.raw_query_string}") if url.raw_query_string else ""
        hash_ = decode(f"#{url.raw_fragment}") if url.raw_fragment else ""

        if username:
            credentials = f"{username}:{password}@" if password else f"{username}@"
        else:
            credentials = ""
        # mailto: and urn: style URLs serialize without "//", file:/// with an empty host
        has_authority = str(url)[len(url.scheme) + 1:].startswith("//")
        authority = f"//{credentials}{host}" if has_authority else ""

        object.__setattr__(self, "url", url)
        object.__setattr__(self, "_protocol", protocol)
        object.__setattr__(self, "_username", username)
        object.__setattr__(self, "_password", password)
        object.__setattr__(self, "_hostname", hostname)
        object.__setattr__(self, "_port", port)
        object.__setattr__(self, "_host", host)
        object.__setattr__(self, "_origin", f"{protocol}//{host}")
        object.__setattr__(self, "_pathname", pathname)
        object.__setattr__(self, "_search", search)
        object.__setattr__(self, "_hash", hash_)
        object.__setattr__(self, "_href", f"{protocol}{authority}{pathname}{search}{hash_}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def protocol(self) -> str:
        return self._protocol

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def hostname(self) -> str:
        """Host without port, IDNA-decoded"""
        return self._hostname

    @property
    def port(self) -> str:
        return self._port

    @property
    def host(self) -> str:
        """Hostname, followed by ":port" for a non-default port"""
        return self._host

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def pathname(self) -> str:
        return self._pathname

    @property
    def search(self) -> str:
        return self._search

    @property
    def hash(self) -> str:
        return self._hash

    @property
    def href(self) -> str:
        return self._href

    @property
    def kind(self) -> IriKind:
        return IriKind.LOCATOR

    def _key(self) -> Tuple[str, ...]:
        return tuple(getattr(self, f"_{name}") for name in _FIELDS)

    def to_string(self) -> str:
        return self._href

    def to_json(self) -> str:
        return self._href

    def __str__(self) -> str:
        return self._href

    def __repr__(self) -> str:
        return f"Irl('{self._href}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Irl):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def build_locator(value: Any, base: Any = None, strict_decoding: bool = True) -> Irl:
    """Build an IRL from `value`, resolved against `base` if given"""
    return Irl(value, base, strict_decoding=strict_decoding)
