"""
Live case lookups against a court portal, with simulated data as fallback.

The portal selectors below are best guesses at the eCourts markup and have
not been verified against the live site.
"""

from __future__ import annotations

import logging
import random
import time
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from court_lookup.providers.base import CaseDataProvider, CaseRecord, format_case_number
from court_lookup.providers.simulated import SimulatedCaseProvider

logger = logging.getLogger(__name__)

COURT_PORTALS = {
    "delhi": "https://delhihighcourt.nic.in",
    "maharashtra": "https://bombayhighcourt.nic.in",
    "karnataka": "https://karnatakajudiciary.kar.nic.in",
    "default": "https://services.ecourts.gov.in/ecourtindia_v6/",
}

USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36",
)


class PortalError(RuntimeError):
    """Raised when the portal answers but the page cannot be used."""


def portal_url(state: str) -> str:
    return COURT_PORTALS.get(state.lower(), COURT_PORTALS["default"])


def _cell_after_label(soup: BeautifulSoup, label: str) -> str:
    wanted = label.lower()
    for cell in soup.find_all("td"):
        if wanted in cell.get_text(" ", strip=True).lower():
            value = cell.find_next_sibling("td")
            if value is not None:
                return value.get_text(" ", strip=True)
    return ""


def _judgment_link(soup: BeautifulSoup, base_url: str) -> str | None:
    anchors = soup.find_all("a", href=True)
    for label in ("judgment", "order"):
        for anchor in anchors:
            if label in anchor.get_text(" ", strip=True).lower():
                try:
                    return urljoin(base_url, anchor["href"])
                except ValueError as exc:
                    raise PortalError(f"Malformed judgment link {anchor['href']!r}") from exc
    return None


def parse_case_details(html: str, case_number: str, base_url: str = COURT_PORTALS["default"]) -> CaseRecord:
    """Extract case fields from a portal results page."""
    soup = BeautifulSoup(html, "html.parser")

    petitioner = _cell_after_label(soup, "Petitioner")
    respondent = _cell_after_label(soup, "Respondent")
    parties = ""
    if petitioner or respondent:
        parties = f"{petitioner or 'Petitioner'} vs {respondent or 'Respondent'}"

    return CaseRecord(
        case_number=case_number,
        parties=parties,
        filing_date=_cell_after_label(soup, "Date of Filing"),
        next_hearing=_cell_after_label(soup, "Next Hearing"),
        status=_cell_after_label(soup, "Case Status"),
        judgment_url=_judgment_link(soup, base_url),
    )


def looks_blocked(html: str) -> bool:
    lowered = html.lower()
    return "captcha" in lowered or "access denied" in lowered


class LiveCaseProvider:
    """Fetches case details from a court portal and falls back to simulated data on failure."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        state: str = "default",
        timeout: float = 30.0,
        delay: float = 1.0,
        max_attempts: int = 3,
        fallback: CaseDataProvider | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = portal_url(state)
        self.timeout = timeout
        self.delay = delay
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()
        self.fallback = fallback or SimulatedCaseProvider(self.rng)

    def fetch(self, case_type: str, case_number: str, year: int) -> CaseRecord:
        try:
            return self.fetch_from_portal(case_type, case_number, year)
        except Exception as exc:
            logger.warning(
                "Live lookup for %s failed, falling back to simulated data: %s",
                format_case_number(case_type, case_number, year),
                exc,
            )
            return self.fallback.fetch(case_type, case_number, year)

    def fetch_from_portal(self, case_type: str, case_number: str, year: int) -> CaseRecord:
        label = format_case_number(case_type, case_number, year)
        params = {"case_type": case_type, "case_no": case_number, "year": year}
        html = self._fetch_html(self.base_url, params=params)
        record = parse_case_details(html, label, self.base_url)
        if not record.parties and not record.status:
            raise PortalError(f"No case details found for {label}")
        return record

    def _fetch_html(self, url: str, *, params: dict | None = None) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=8),
            retry=retry_if_exception_type(requests.RequestException),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                self._polite_delay()
                logger.debug("Requesting %s", url)
                response = self.session.get(
                    url,
                    params=params,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
                response.raise_for_status()
                html = response.text

        if looks_blocked(html):
            raise PortalError(f"Potential block detected when fetching {url}")
        return html

    def _headers(self) -> dict:
        return {
            "User-Agent": self.rng.choice(USER_AGENTS),
            "Accept": "text/html,application/xhtml+xml,application/xml",
            "Accept-Language": "en-US,en;q=0.9",
            "Connection": "keep-alive",
        }

    def _polite_delay(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)
