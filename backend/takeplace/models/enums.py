"""Enums for the Take Place domain models."""

from enum import StrEnum


class ProvinceCode(StrEnum):
    """Canadian provinces and territories the estimator prices for."""

    AB = "AB"
    BC = "BC"
    MB = "MB"
    NB = "NB"
    NL = "NL"
    NS = "NS"
    ON = "ON"
    PE = "PE"
    QC = "QC"
    SK = "SK"
    NT = "NT"
    NU = "NU"
    YT = "YT"


class FloorAreaType(StrEnum):
    """How floor areas are measured when shown to a customer.

    Gross is measured to the exterior face of the walls, net to the
    interior face. Pricing always works on gross areas.
    """

    GROSS = "gross"
    NET = "net"
