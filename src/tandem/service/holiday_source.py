# SPDX-License-Identifier: MIT

from typing import Protocol

import httpx

from tandem.model.holiday import Holiday
from tandem.time import date_from_str, date_to_str


class HolidayFetchError(RuntimeError):
    def __init__(self, year: int, reason: str) -> None:
        super().__init__(f"Failed to fetch holidays for {year}: {reason}")
        self.year = year


class HolidaySource(Protocol):
    def fetch(self, year: int) -> list[Holiday]: ...


def parse_holiday_payload(payload: object) -> list[Holiday]:
    """
    Flatten a '{date: [names]}' payload into holiday entries.

    Several names on one date are joined into a single title.

    Raises:
        ValueError: If the payload is not an object or a key is not a
            zero-padded 'YYYY-MM-DD' date
    """
    if not isinstance(payload, dict):
        raise ValueError("Holiday payload must be an object keyed by date")

    holidays: list[Holiday] = []
    for date, names in payload.items():
        if isinstance(names, list):
            title = " / ".join(str(name) for name in names)
        else:
            title = str(names)
        holidays.append(
            {"date": date_to_str(date_from_str(str(date))), "title": title}
        )
    return holidays


class HttpHolidaySource:
    """Fetches '<base_url><year>.json' documents over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self._client = client

    def fetch(self, year: int) -> list[Holiday]:
        url = f"{self.base_url}{year}.json"
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self.timeout)
            else:
                response = httpx.get(url, timeout=self.timeout)
            response.raise_for_status()
            return parse_holiday_payload(response.json())
        except (httpx.HTTPError, ValueError) as e:
            raise HolidayFetchError(year, str(e)) from e
