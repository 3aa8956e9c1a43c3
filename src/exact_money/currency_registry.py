"""Read-only table of ISO 4217 currencies.

Every currency is available as a module-level constant (`EUR`, `USD`, ...) and
through `resolve`, which accepts a `Currency`, an alphabetic code such as
"eur", or a numeric code such as "978" / 978. The table is built once at import
time and exposes no mutation operations.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, TypeAlias

from bidict import bidict

from exact_money.currency import Currency
from exact_money.errors import InvalidCurrency

logger = logging.getLogger(__name__)

# Anything `resolve` accepts
CurrencyLike: TypeAlias = Currency | str | int


# region Currency constants

AED = Currency("AED", 2, "UAE Dirham", "د.إ", "784")
AFN = Currency("AFN", 2, "Afghan Afghani", "؋", "971")
ALL = Currency("ALL", 2, "Albanian Lek", "L", "008")
AMD = Currency("AMD", 2, "Armenian Dram", "֏", "051")
ARS = Currency("ARS", 2, "Argentine Peso", "$", "032")
AUD = Currency("AUD", 2, "Australian Dollar", "A$", "036")
AZN = Currency("AZN", 2, "Azerbaijani Manat", "₼", "944")
BAM = Currency("BAM", 2, "Bosnia-Herzegovina Convertible Mark", "KM", "977")
BDT = Currency("BDT", 2, "Bangladeshi Taka", "৳", "050")
BGN = Currency("BGN", 2, "Bulgarian Lev", "лв", "975")
BHD = Currency("BHD", 3, "Bahraini Dinar", ".د.ب", "048")
BIF = Currency("BIF", 0, "Burundian Franc", "FBu", "108")
BOB = Currency("BOB", 2, "Bolivian Boliviano", "Bs", "068")
BRL = Currency("BRL", 2, "Brazilian Real", "R$", "986")
BWP = Currency("BWP", 2, "Botswanan Pula", "P", "072")
BYN = Currency("BYN", 2, "Belarusian Ruble", "Br", "933")
BZD = Currency("BZD", 2, "Belize Dollar", "BZ$", "084")
CAD = Currency("CAD", 2, "Canadian Dollar", "CA$", "124")
CDF = Currency("CDF", 2, "Congolese Franc", "FC", "976")
CHF = Currency("CHF", 2, "Swiss Franc", "CHF", "756")
CLF = Currency("CLF", 4, "Chilean Unit of Account (UF)", "UF", "990")
CLP = Currency("CLP", 0, "Chilean Peso", "$", "152")
CNY = Currency("CNY", 2, "Chinese Yuan", "CN¥", "156")
COP = Currency("COP", 2, "Colombian Peso", "$", "170")
CRC = Currency("CRC", 2, "Costa Rican Colón", "₡", "188")
CVE = Currency("CVE", 2, "Cape Verdean Escudo", "Esc", "132")
CZK = Currency("CZK", 2, "Czech Koruna", "Kč", "203")
DJF = Currency("DJF", 0, "Djiboutian Franc", "Fdj", "262")
DKK = Currency("DKK", 2, "Danish Krone", "kr", "208")
DOP = Currency("DOP", 2, "Dominican Peso", "RD$", "214")
DZD = Currency("DZD", 2, "Algerian Dinar", "د.ج", "012")
EGP = Currency("EGP", 2, "Egyptian Pound", "E£", "818")
ETB = Currency("ETB", 2, "Ethiopian Birr", "Br", "230")
EUR = Currency("EUR", 2, "Euro", "€", "978")
GBP = Currency("GBP", 2, "British Pound", "£", "826")
GEL = Currency("GEL", 2, "Georgian Lari", "₾", "981")
GHS = Currency("GHS", 2, "Ghanaian Cedi", "GH₵", "936")
GNF = Currency("GNF", 0, "Guinean Franc", "FG", "324")
GTQ = Currency("GTQ", 2, "Guatemalan Quetzal", "Q", "320")
HKD = Currency("HKD", 2, "Hong Kong Dollar", "HK$", "344")
HNL = Currency("HNL", 2, "Honduran Lempira", "L", "340")
HUF = Currency("HUF", 2, "Hungarian Forint", "Ft", "348")
IDR = Currency("IDR", 2, "Indonesian Rupiah", "Rp", "360")
ILS = Currency("ILS", 2, "Israeli New Shekel", "₪", "376")
INR = Currency("INR", 2, "Indian Rupee", "₹", "356")
IQD = Currency("IQD", 3, "Iraqi Dinar", "ع.د", "368")
IRR = Currency("IRR", 2, "Iranian Rial", "﷼", "364")
ISK = Currency("ISK", 0, "Icelandic Króna", "kr", "352")
JMD = Currency("JMD", 2, "Jamaican Dollar", "J$", "388")
JOD = Currency("JOD", 3, "Jordanian Dinar", "JD", "400")
JPY = Currency("JPY", 0, "Japanese Yen", "¥", "392")
KES = Currency("KES", 2, "Kenyan Shilling", "KSh", "404")
KHR = Currency("KHR", 2, "Cambodian Riel", "៛", "116")
KMF = Currency("KMF", 0, "Comorian Franc", "CF", "174")
KRW = Currency("KRW", 0, "South Korean Won", "₩", "410")
KWD = Currency("KWD", 3, "Kuwaiti Dinar", "KD", "414")
KZT = Currency("KZT", 2, "Kazakhstani Tenge", "₸", "398")
LBP = Currency("LBP", 2, "Lebanese Pound", "ل.ل", "422")
LKR = Currency("LKR", 2, "Sri Lankan Rupee", "Rs", "144")
LYD = Currency("LYD", 3, "Libyan Dinar", "LD", "434")
MAD = Currency("MAD", 2, "Moroccan Dirham", "MAD", "504")
MDL = Currency("MDL", 2, "Moldovan Leu", "L", "498")
MGA = Currency("MGA", 2, "Malagasy Ariary", "Ar", "969")
MKD = Currency("MKD", 2, "Macedonian Denar", "ден", "807")
MMK = Currency("MMK", 2, "Myanmar Kyat", "K", "104")
MOP = Currency("MOP", 2, "Macanese Pataca", "MOP$", "446")
MUR = Currency("MUR", 2, "Mauritian Rupee", "₨", "480")
MXN = Currency("MXN", 2, "Mexican Peso", "MX$", "484")
MYR = Currency("MYR", 2, "Malaysian Ringgit", "RM", "458")
MZN = Currency("MZN", 2, "Mozambican Metical", "MT", "943")
NAD = Currency("NAD", 2, "Namibian Dollar", "N$", "516")
NGN = Currency("NGN", 2, "Nigerian Naira", "₦", "566")
NIO = Currency("NIO", 2, "Nicaraguan Córdoba", "C$", "558")
NOK = Currency("NOK", 2, "Norwegian Krone", "kr", "578")
NPR = Currency("NPR", 2, "Nepalese Rupee", "₨", "524")
NZD = Currency("NZD", 2, "New Zealand Dollar", "NZ$", "554")
OMR = Currency("OMR", 3, "Omani Rial", "ر.ع.", "512")
PAB = Currency("PAB", 2, "Panamanian Balboa", "B/.", "590")
PEN = Currency("PEN", 2, "Peruvian Sol", "S/", "604")
PHP = Currency("PHP", 2, "Philippine Peso", "₱", "608")
PKR = Currency("PKR", 2, "Pakistani Rupee", "₨", "586")
PLN = Currency("PLN", 2, "Polish Zloty", "zł", "985")
PYG = Currency("PYG", 0, "Paraguayan Guarani", "₲", "600")
QAR = Currency("QAR", 2, "Qatari Riyal", "ر.ق", "634")
RON = Currency("RON", 2, "Romanian Leu", "lei", "946")
RSD = Currency("RSD", 2, "Serbian Dinar", "дин.", "941")
RUB = Currency("RUB", 2, "Russian Ruble", "₽", "643")
RWF = Currency("RWF", 0, "Rwandan Franc", "RF", "646")
SAR = Currency("SAR", 2, "Saudi Riyal", "ر.س", "682")
SEK = Currency("SEK", 2, "Swedish Krona", "kr", "752")
SGD = Currency("SGD", 2, "Singapore Dollar", "S$", "702")
THB = Currency("THB", 2, "Thai Baht", "฿", "764")
TND = Currency("TND", 3, "Tunisian Dinar", "DT", "788")
TRY = Currency("TRY", 2, "Turkish Lira", "₺", "949")
TTD = Currency("TTD", 2, "Trinidad and Tobago Dollar", "TT$", "780")
TWD = Currency("TWD", 2, "New Taiwan Dollar", "NT$", "901")
TZS = Currency("TZS", 2, "Tanzanian Shilling", "TSh", "834")
UAH = Currency("UAH", 2, "Ukrainian Hryvnia", "₴", "980")
UGX = Currency("UGX", 0, "Ugandan Shilling", "USh", "800")
USD = Currency("USD", 2, "US Dollar", "$", "840")
UYU = Currency("UYU", 2, "Uruguayan Peso", "$U", "858")
UZS = Currency("UZS", 2, "Uzbekistan Som", "soʻm", "860")
VND = Currency("VND", 0, "Vietnamese Dong", "₫", "704")
XAF = Currency("XAF", 0, "Central African CFA Franc", "FCFA", "950")
XOF = Currency("XOF", 0, "West African CFA Franc", "CFA", "952")
YER = Currency("YER", 2, "Yemeni Rial", "﷼", "886")
ZAR = Currency("ZAR", 2, "South African Rand", "R", "710")
ZMW = Currency("ZMW", 2, "Zambian Kwacha", "ZK", "967")

# endregion


def _build_tables() -> tuple[dict[str, Currency], bidict[str, str]]:
    """Collect the module-level Currency constants into lookup tables.

    Raises:
        ValueError: If two constants share an alphabetic or numeric code.
    """
    by_code: dict[str, Currency] = {}
    numeric_by_code: bidict[str, str] = bidict()

    for attribute_name, value in sorted(globals().items()):
        if not isinstance(value, Currency):
            continue

        # Raise: constant name must match the code it holds
        if attribute_name != value.code:
            raise ValueError(f"Currency constant '{attribute_name}' holds a currency with different $code '{value.code}'")

        if value.code in by_code:
            raise ValueError(f"Currency with code '{value.code}' is defined more than once")

        by_code[value.code] = value
        # bidict raises ValueDuplicationError when two codes share a numeric code
        numeric_by_code[value.code] = value.numeric_code

    return by_code, numeric_by_code


_currencies_by_code, _numeric_code_by_code = _build_tables()

# Read-only view: code -> Currency
CURRENCIES: Mapping[str, Currency] = MappingProxyType(_currencies_by_code)

logger.debug(f"Currency registry built with {len(CURRENCIES)} currencies")


def all_currencies() -> tuple[Currency, ...]:
    """Return every registered currency, ordered by code."""
    return tuple(CURRENCIES.values())


def numeric_code_of(code: str) -> str:
    """Return the ISO 4217 numeric code for alphabetic $code.

    Raises:
        InvalidCurrency: If $code is not registered.
    """
    return resolve(code).numeric_code


def resolve(identifier: CurrencyLike) -> Currency:
    """Resolve a currency identifier to the registered `Currency`.

    Args:
        identifier: A `Currency`, an alphabetic code ("EUR", " eur "), a numeric
            code as string ("978") or as int (978).

    Returns:
        Currency: The registered currency instance.

    Raises:
        InvalidCurrency: If $identifier has an unsupported type or is not registered.
    """
    if isinstance(identifier, Currency):
        registered = _currencies_by_code.get(identifier.code)
        # Raise: a hand-made Currency must match the registered definition exactly
        if registered is None or registered.__reduce__() != identifier.__reduce__():
            raise InvalidCurrency(f"$currency is not a registered currency, but provided value is: {identifier!r}")
        return registered

    # Numeric codes ("978" or 978)
    if isinstance(identifier, int) and not isinstance(identifier, bool):
        identifier = f"{identifier:03d}" if identifier >= 0 else str(identifier)

    if not isinstance(identifier, str):
        raise InvalidCurrency(f"$currency must be a Currency or a currency code, but provided value is: {identifier!r}")

    key = identifier.strip().upper()
    if key.isdigit():
        code = _numeric_code_by_code.inverse.get(key)
        if code is None:
            raise InvalidCurrency(f"Currency with numeric code '{key}' not found in registry")
        return _currencies_by_code[code]

    currency = _currencies_by_code.get(key)
    if currency is None:
        raise InvalidCurrency(f"Currency with code '{key}' not found in registry")
    return currency


def is_known(identifier: object) -> bool:
    """Check whether $identifier resolves to a registered currency.

    Unlike `resolve`, this never raises.
    """
    try:
        resolve(identifier)
    except InvalidCurrency:
        return False
    return True
