"""Airline display names by IATA 2-letter code."""

from typing import Optional

# Flight numbers carry the IATA prefix, so that is the lookup key here
AIRLINE_NAMES: dict[str, str] = {
    "3U": "Sichuan Airlines",
    "9C": "Spring Airlines",
    "AA": "American Airlines",
    "AC": "Air Canada",
    "AF": "Air France",
    "BA": "British Airways",
    "BR": "EVA Air",
    "CA": "Air China",
    "CI": "China Airlines",
    "CX": "Cathay Pacific",
    "CZ": "China Southern Airlines",
    "DL": "Delta Air Lines",
    "EK": "Emirates",
    "FM": "Shanghai Airlines",
    "GS": "Tianjin Airlines",
    "HO": "Juneyao Air",
    "HU": "Hainan Airlines",
    "HX": "Hong Kong Airlines",
    "JL": "Japan Airlines",
    "KA": "Cathay Dragon",
    "KE": "Korean Air",
    "LH": "Lufthansa",
    "MF": "Xiamen Airlines",
    "MU": "China Eastern Airlines",
    "NH": "All Nippon Airways",
    "OZ": "Asiana Airlines",
    "QF": "Qantas",
    "SQ": "Singapore Airlines",
    "TR": "Scoot",
    "UA": "United Airlines",
    "UO": "HK Express",
    "ZH": "Shenzhen Airlines",
}


def get_airline_name(code: str) -> Optional[str]:
    """Look up airline name by IATA code. Returns None if not found."""
    if not code:
        return None
    return AIRLINE_NAMES.get(code.upper().strip())
