"""Static tables of Slovenian statute abbreviations.

Maps the abbreviations used in citations ("ZKP", "KZ-1") to PIS document
ids and to full statute names. The ids follow the PIS naming convention
(e.g. "zakon-o-kazenskem-postopku").
"""

import re
from types import MappingProxyType

STATUTE_ABBREVIATIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        # Constitutional
        "URS": "ustava-rs",
        "Ustava": "ustava-rs",
        # Civil / obligations
        "OZ": "obligacijski-zakonik",
        "SPZ": "stvarnopravni-zakonik",
        "DZ": "dedni-zakon",
        "ZZZDR": "zakon-o-zakonski-zvezi-in-druzinskih-razmerjih",
        "DZ-1": "druzinski-zakonik",
        "ZZK-1": "zakon-o-zemljiski-knjigi",
        # Criminal
        "KZ-1": "kazenski-zakonik",
        "ZKP": "zakon-o-kazenskem-postopku",
        "ZP-1": "zakon-o-prekrskih",
        # Procedural
        "ZPP": "zakon-o-pravdnem-postopku",
        "ZIZ": "zakon-o-izvrsbi-in-zavarovanju",
        "ZUS-1": "zakon-o-upravnem-sporu",
        "ZUP": "zakon-o-splosnem-upravnem-postopku",
        # Commercial / corporate
        "ZGD-1": "zakon-o-gospodarskih-druzbah",
        "ZFPPIPP": (
            "zakon-o-financnem-poslovanju-postopkih-zaradi-insolventnosti"
            "-in-prisilnem-prenehanju"
        ),
        # Labour and social security
        "ZDR-1": "zakon-o-delovnih-razmerjih",
        "ZUTD": "zakon-o-urejanju-trga-dela",
        "ZPIZ-2": "zakon-o-pokojninskem-in-invalidskem-zavarovanju",
        # Administrative
        "ZLS": "zakon-o-lokalni-samoupravi",
        "ZJU": "zakon-o-javnih-usluzbenskih",
        "ZDU-1": "zakon-o-drzavni-upravi",
        # Data protection
        "ZVOP-2": "zakon-o-varstvu-osebnih-podatkov",
        # Tax
        "ZDavP-2": "zakon-o-davcnem-postopku",
        "ZDDV-1": "zakon-o-davku-na-dodano-vrednost",
        "ZDoh-2": "zakon-o-dohodnini",
        "ZDDPO-2": "zakon-o-davku-od-dohodkov-pravnih-oseb",
        # Environment and construction
        "ZVO-2": "zakon-o-varstvu-okolja",
        "ZGO-1": "zakon-o-graditvi-objektov",
        # Other key statutes
        "ZJN-3": "zakon-o-javnem-narocanju",
        "ZMed": "zakon-o-medijih",
        "ZZavar-1": "zakon-o-zavarovalnistvu",
        "ZBan-3": "zakon-o-bancnistvu",
        "ZTFI-1": "zakon-o-trgu-financnih-instrumentov",
    }
)

STATUTE_FULL_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {
        "URS": "Ustava Republike Slovenije",
        "Ustava": "Ustava Republike Slovenije",
        "OZ": "Obligacijski zakonik",
        "SPZ": "Stvarnopravni zakonik",
        "DZ": "Dedni zakon",
        "ZZZDR": "Zakon o zakonski zvezi in družinskih razmerjih",
        "DZ-1": "Družinski zakonik",
        "ZZK-1": "Zakon o zemljiški knjigi",
        "KZ-1": "Kazenski zakonik",
        "ZKP": "Zakon o kazenskem postopku",
        "ZP-1": "Zakon o prekrških",
        "ZPP": "Zakon o pravdnem postopku",
        "ZIZ": "Zakon o izvršbi in zavarovanju",
        "ZUS-1": "Zakon o upravnem sporu",
        "ZUP": "Zakon o splošnem upravnem postopku",
        "ZGD-1": "Zakon o gospodarskih družbah",
        "ZFPPIPP": (
            "Zakon o finančnem poslovanju, postopkih zaradi insolventnosti "
            "in prisilnem prenehanju"
        ),
        "ZDR-1": "Zakon o delovnih razmerjih",
        "ZUTD": "Zakon o urejanju trga dela",
        "ZPIZ-2": "Zakon o pokojninskem in invalidskem zavarovanju",
        "ZLS": "Zakon o lokalni samoupravi",
        "ZJU": "Zakon o javnih uslužbencih",
        "ZDU-1": "Zakon o državni upravi",
        "ZVOP-2": "Zakon o varstvu osebnih podatkov",
        "ZDavP-2": "Zakon o davčnem postopku",
        "ZDDV-1": "Zakon o davku na dodano vrednost",
        "ZDoh-2": "Zakon o dohodnini",
        "ZDDPO-2": "Zakon o davku od dohodkov pravnih oseb",
        "ZVO-2": "Zakon o varstvu okolja",
        "ZGO-1": "Zakon o graditvi objektov",
        "ZJN-3": "Zakon o javnem naročanju",
        "ZMed": "Zakon o medijih",
        "ZZavar-1": "Zakon o zavarovalništvu",
        "ZBan-3": "Zakon o bančništvu",
        "ZTFI-1": "Zakon o trgu finančnih instrumentov",
    }
)

# Case-insensitive index onto the canonical keys ("zkp" -> "ZKP").
_CANONICAL_BY_FOLDED: dict[str, str] = {
    abbr.casefold(): abbr for abbr in STATUTE_ABBREVIATIONS
}


def canonical_abbreviation(abbreviation: str) -> str | None:
    """Return the table spelling of an abbreviation, ignoring case."""
    return _CANONICAL_BY_FOLDED.get(abbreviation.casefold())


def abbreviation_alternation() -> str:
    """Regex alternation of all known abbreviations, longest first.

    Longest-first keeps "DZ-1" from being shadowed by "DZ" in unanchored use.
    """
    ordered = sorted(STATUTE_ABBREVIATIONS, key=len, reverse=True)
    return "|".join(re.escape(abbr) for abbr in ordered)
