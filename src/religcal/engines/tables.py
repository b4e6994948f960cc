"""
religcal.engines.tables
-----------------------
Declarative observance tables. Lookup logic lives in the engines; these
records carry only the calendar anchor and the descriptive text.

Anchors:
  - HijriHoliday:  (Hijri month, day)
  - FixedHoliday:  approximate (Gregorian month, day)
  - MoveableFeast: day offset from Easter Sunday (season markers: from Advent start)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.types import ObservanceType


@dataclass(frozen=True)
class HijriHoliday:
    month: int
    day: int
    name: str
    description: str
    significance: str
    astronomical_basis: str
    observance_type: ObservanceType

    @property
    def key(self) -> str:
        return f"{self.month}-{self.day}"


@dataclass(frozen=True)
class FixedHoliday:
    month: int
    day: int
    name: str
    slug: str
    description: str
    significance: str
    observance_type: ObservanceType
    astronomical_basis: Optional[str] = None


@dataclass(frozen=True)
class MoveableFeast:
    offset: int  # days from the anchor: Easter Sunday, or Advent start for season markers
    name: str
    slug: str
    description: str
    significance: str
    astronomical_basis: str
    observance_type: ObservanceType


# ============================================================
# ISLAMIC
# ============================================================

HIJRI_MONTH_NAMES: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani",
    "Jumada al-Awwal", "Jumada al-Thani", "Rajab", "Shaban",
    "Ramadan", "Shawwal", "Dhul-Qadah", "Dhul-Hijjah",
)

_ISLAMIC = (
    HijriHoliday(
        1, 1, "Islamic New Year (Hijri New Year)",
        "The first day of Muharram, marking the beginning of the Islamic lunar calendar year.",
        "Commemorates the Hijra (migration) of Prophet Muhammad from Mecca to Medina in 622 CE.",
        "Based on the sighting of the new moon of Muharram",
        "holiday",
    ),
    HijriHoliday(
        1, 10, "Day of Ashura",
        "The tenth day of Muharram, a day of fasting and remembrance.",
        "Commemorates various historical events, including the martyrdom of Husayn ibn Ali. "
        "Many Muslims fast on this day.",
        "Tenth day of the lunar month of Muharram",
        "fast",
    ),
    HijriHoliday(
        3, 12, "Mawlid al-Nabi (Prophet's Birthday)",
        "Celebration of the birth of Prophet Muhammad.",
        "Observed by many Muslims worldwide with gatherings, prayers, and charitable acts.",
        "Twelfth day of the lunar month of Rabi al-Awwal",
        "holiday",
    ),
    HijriHoliday(
        7, 27, "Isra and Mi'raj",
        "Commemorates the night journey of Prophet Muhammad from Mecca to Jerusalem and his ascension.",
        "A miraculous journey that holds great spiritual significance in Islamic tradition.",
        "Twenty-seventh day of the lunar month of Rajab",
        "holiday",
    ),
    HijriHoliday(
        8, 15, "Laylat al-Bara'ah (Night of Forgiveness)",
        "The night of the middle of Shaban, considered a night of forgiveness and blessings.",
        "Many Muslims spend this night in prayer and seek forgiveness.",
        "Fifteenth day of the lunar month of Shaban (full moon)",
        "holiday",
    ),
    HijriHoliday(
        9, 1, "First Day of Ramadan",
        "The beginning of the holy month of fasting.",
        "Muslims fast from dawn to sunset throughout this month, commemorating the revelation of the Quran.",
        "Based on the sighting of the new moon of Ramadan",
        "fast",
    ),
    HijriHoliday(
        9, 27, "Laylat al-Qadr (Night of Power)",
        "The night when the Quran was first revealed to Prophet Muhammad.",
        "Considered the holiest night of the year. Typically observed on the 27th, though it could be "
        "any odd night in the last ten days of Ramadan.",
        "Twenty-seventh day of the lunar month of Ramadan",
        "holiday",
    ),
    HijriHoliday(
        10, 1, "Eid al-Fitr",
        "Festival of Breaking the Fast, marking the end of Ramadan.",
        "A joyous celebration with special prayers, feasting, and charity. One of the two major Islamic holidays.",
        "Based on the sighting of the new moon of Shawwal",
        "feast",
    ),
    HijriHoliday(
        12, 9, "Day of Arafah",
        "The day when pilgrims gather at Mount Arafat during Hajj.",
        "Considered the most important day of Hajj. Non-pilgrims often fast on this day.",
        "Ninth day of the lunar month of Dhul-Hijjah",
        "holiday",
    ),
    HijriHoliday(
        12, 10, "Eid al-Adha",
        "Festival of Sacrifice, commemorating Abraham's willingness to sacrifice his son.",
        "The second major Islamic holiday, marked by the sacrifice of an animal and distribution of meat to the poor.",
        "Tenth day of the lunar month of Dhul-Hijjah",
        "feast",
    ),
)

ISLAMIC_HOLIDAYS: Dict[str, HijriHoliday] = {h.key: h for h in _ISLAMIC}


# ============================================================
# JEWISH
# ============================================================

# Gregorian anchors are approximations of the lunisolar dates.
JEWISH_HOLIDAYS: Tuple[FixedHoliday, ...] = (
    FixedHoliday(
        9, 15, "Rosh Hashana", "rosh-hashana",
        "The Jewish New Year, a time of reflection and renewal.",
        "Marks the beginning of the High Holy Days and the start of the Hebrew calendar year.",
        "feast",
        "Begins on the first day of Tishrei, the seventh month of the Hebrew lunar calendar",
    ),
    FixedHoliday(
        9, 24, "Yom Kippur", "yom-kippur",
        "The Day of Atonement, the holiest day in the Jewish calendar.",
        "A day of fasting, prayer, and repentance.",
        "fast",
        "Occurs on the tenth day of Tishrei, ten days after Rosh Hashana",
    ),
    FixedHoliday(
        9, 29, "Sukkot", "sukkot",
        "The Feast of Tabernacles, commemorating the Israelites' journey through the desert.",
        "Jews build and dwell in temporary structures (sukkot) and celebrate the fall harvest.",
        "feast",
        "Begins on the fifteenth day of Tishrei, during the full moon",
    ),
    FixedHoliday(
        12, 10, "Chanukah", "chanukah",
        "The Festival of Lights, commemorating the rededication of the Second Temple.",
        "Celebrates the miracle of the oil that burned for eight days.",
        "feast",
        "Begins on the twenty-fifth day of Kislev, near the winter solstice",
    ),
    FixedHoliday(
        3, 14, "Purim", "purim",
        "Celebrates the salvation of the Jewish people from Haman's plot in ancient Persia.",
        "Marked by reading the Megillah (Book of Esther), giving to charity, and festive meals.",
        "feast",
        "Occurs on the fourteenth day of Adar, one month before Passover",
    ),
    FixedHoliday(
        4, 15, "Pesach (Passover)", "pesach-passover",
        "Passover, commemorating the Exodus from Egypt.",
        "Celebrates freedom from slavery. Families hold Seders and eat matzah.",
        "feast",
        "Begins on the fifteenth day of Nisan, during the full moon of spring",
    ),
    FixedHoliday(
        6, 6, "Shavuot", "shavuot",
        "The Feast of Weeks, celebrating the giving of the Torah at Mount Sinai.",
        "Commemorates the revelation of the Torah and the spring harvest.",
        "feast",
        "Occurs fifty days after Passover",
    ),
)

SHABBAT = FixedHoliday(
    0, 0, "Shabbat", "shabbat",
    "The Jewish Sabbath, a day of rest.",
    "The seventh day of the week, a day of rest and spiritual enrichment.",
    "sabbath",
    "From Friday evening to Saturday evening, based on sunset",
)


# ============================================================
# CHRISTIAN
# ============================================================

_FIXED_BASIS = "Fixed date in the Gregorian calendar"

FIXED_FEASTS: Tuple[FixedHoliday, ...] = (
    FixedHoliday(
        1, 1, "Solemnity of Mary, Mother of God", "mary-mother-of-god",
        "Celebrates Mary's role as the Mother of God.",
        "A holy day of obligation in the Catholic Church, honoring the Blessed Virgin Mary.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        1, 6, "Epiphany", "epiphany",
        "Commemorates the visit of the Magi to the infant Jesus.",
        "Celebrates the manifestation of Christ to the Gentiles.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        2, 2, "Presentation of the Lord (Candlemas)", "candlemas",
        "Commemorates the presentation of Jesus at the Temple.",
        "Celebrates Jesus being presented at the Temple 40 days after his birth.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        3, 25, "Annunciation", "annunciation",
        "Celebrates the announcement by the Angel Gabriel to Mary.",
        "Commemorates when the angel told Mary she would conceive and bear the Son of God.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        6, 24, "Nativity of John the Baptist", "nativity-of-john-the-baptist",
        "Celebrates the birth of John the Baptist.",
        "One of the few saints whose birth is celebrated, six months before Christmas.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        8, 6, "Transfiguration", "transfiguration",
        "Commemorates the transfiguration of Jesus on Mount Tabor.",
        "Celebrates when Jesus' divine nature was revealed to Peter, James, and John.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        8, 15, "Assumption of Mary", "assumption",
        "Celebrates the assumption of Mary into heaven.",
        "A holy day of obligation celebrating Mary being taken body and soul into heavenly glory.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        9, 8, "Nativity of Mary", "nativity-of-mary",
        "Celebrates the birth of the Blessed Virgin Mary.",
        "Honors the birth of Mary, mother of Jesus.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        11, 1, "All Saints' Day", "all-saints",
        "Honors all saints, known and unknown.",
        "A holy day of obligation celebrating all saints who have attained heaven.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        12, 8, "Immaculate Conception", "immaculate-conception",
        "Celebrates Mary being conceived without original sin.",
        "A holy day of obligation honoring Mary's conception.",
        "feast", _FIXED_BASIS,
    ),
    FixedHoliday(
        12, 25, "Christmas", "christmas",
        "Celebrates the birth of Jesus Christ.",
        "The most important feast celebrating the Incarnation.",
        "feast", _FIXED_BASIS,
    ),
)

MOVEABLE_FEASTS: Tuple[MoveableFeast, ...] = (
    MoveableFeast(
        -46, "Ash Wednesday", "ash-wednesday",
        "Marks the beginning of Lent, a 40-day period of fasting and penance.",
        "Christians receive ashes on their foreheads as a sign of repentance and mortality.",
        "46 days before Easter Sunday", "fast",
    ),
    MoveableFeast(
        -7, "Palm Sunday", "palm-sunday",
        "Commemorates Jesus' triumphal entry into Jerusalem.",
        "Marks the beginning of Holy Week.",
        "Sunday before Easter", "feast",
    ),
    MoveableFeast(
        -3, "Maundy Thursday", "maundy-thursday",
        "Commemorates the Last Supper of Jesus with his disciples.",
        "Celebrates the institution of the Eucharist and Jesus washing the disciples' feet.",
        "Thursday before Easter", "feast",
    ),
    MoveableFeast(
        -2, "Good Friday", "good-friday",
        "Commemorates the crucifixion and death of Jesus Christ.",
        "The most solemn day of the Christian year.",
        "Friday before Easter", "fast",
    ),
    MoveableFeast(
        0, "Easter Sunday", "easter",
        "Celebrates the resurrection of Jesus Christ from the dead.",
        "The most important feast in Christianity.",
        "First Sunday after the first full moon following the spring equinox", "feast",
    ),
    MoveableFeast(
        39, "Ascension of Jesus", "ascension",
        "Commemorates Jesus' ascension into heaven.",
        "Celebrates Jesus ascending to heaven 40 days after his resurrection.",
        "Fortieth day of Easter, counting Easter Sunday as the first", "feast",
    ),
    MoveableFeast(
        49, "Pentecost", "pentecost",
        "Celebrates the descent of the Holy Spirit upon the apostles.",
        "Marks the birth of the Church.",
        "Fiftieth day of Easter, counting Easter Sunday as the first", "feast",
    ),
    MoveableFeast(
        56, "Trinity Sunday", "trinity-sunday",
        "Honors the Holy Trinity: Father, Son, and Holy Spirit.",
        "Celebrates the doctrine of one God in three persons.",
        "First Sunday after Pentecost", "feast",
    ),
    MoveableFeast(
        60, "Corpus Christi", "corpus-christi",
        "Honors the Eucharist, the body and blood of Christ.",
        "Celebrates the real presence of Christ in the Eucharist.",
        "Thursday after Trinity Sunday", "feast",
    ),
)

ADVENT_START = MoveableFeast(
    0, "First Sunday of Advent", "advent-start",
    "Marks the beginning of the liturgical year and the Advent season.",
    "A season of preparation for Christmas, lasting four weeks.",
    "Fourth Sunday before Christmas", "holiday",
)

CHRIST_THE_KING = MoveableFeast(
    -7, "Christ the King", "christ-the-king",
    "Celebrates Jesus Christ as King of the Universe.",
    "The last Sunday of Ordinary Time, concluding the liturgical year.",
    "Last Sunday before Advent", "feast",
)
