"""ISO 639-1 language catalog.

Defines the closed set of languages a translation can be written in,
with their canonical names and native spellings.
"""

from enum import Enum
from typing import Dict, Tuple

from glossa.i18n.distance import closest_match
from glossa.i18n.errors import LanguageError


class Language(str, Enum):
    """ISO 639-1 language identifiers.

    Values are the lower-case two letter codes (e.g., "en", "es").
    Equality and hashing are by code.
    """

    AA = "aa"
    AB = "ab"
    AE = "ae"
    AF = "af"
    AK = "ak"
    AM = "am"
    AN = "an"
    AR = "ar"
    AS = "as"
    AV = "av"
    AY = "ay"
    AZ = "az"
    BA = "ba"
    BE = "be"
    BG = "bg"
    BH = "bh"
    BI = "bi"
    BM = "bm"
    BN = "bn"
    BO = "bo"
    BR = "br"
    BS = "bs"
    CA = "ca"
    CE = "ce"
    CH = "ch"
    CO = "co"
    CR = "cr"
    CS = "cs"
    CU = "cu"
    CV = "cv"
    CY = "cy"
    DA = "da"
    DE = "de"
    DV = "dv"
    DZ = "dz"
    EE = "ee"
    EL = "el"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    EU = "eu"
    FA = "fa"
    FF = "ff"
    FI = "fi"
    FJ = "fj"
    FO = "fo"
    FR = "fr"
    FY = "fy"
    GA = "ga"
    GD = "gd"
    GL = "gl"
    GN = "gn"
    GU = "gu"
    GV = "gv"
    HA = "ha"
    HE = "he"
    HI = "hi"
    HO = "ho"
    HR = "hr"
    HT = "ht"
    HU = "hu"
    HY = "hy"
    HZ = "hz"
    IA = "ia"
    ID = "id"
    IE = "ie"
    IG = "ig"
    II = "ii"
    IK = "ik"
    IO = "io"
    IS = "is"
    IT = "it"
    IU = "iu"
    JA = "ja"
    JV = "jv"
    KA = "ka"
    KG = "kg"
    KI = "ki"
    KJ = "kj"
    KK = "kk"
    KL = "kl"
    KM = "km"
    KN = "kn"
    KO = "ko"
    KR = "kr"
    KS = "ks"
    KU = "ku"
    KV = "kv"
    KW = "kw"
    KY = "ky"
    LA = "la"
    LB = "lb"
    LG = "lg"
    LI = "li"
    LN = "ln"
    LO = "lo"
    LT = "lt"
    LU = "lu"
    LV = "lv"
    MG = "mg"
    MH = "mh"
    MI = "mi"
    MK = "mk"
    ML = "ml"
    MN = "mn"
    MR = "mr"
    MS = "ms"
    MT = "mt"
    MY = "my"
    NA = "na"
    NB = "nb"
    ND = "nd"
    NE = "ne"
    NG = "ng"
    NL = "nl"
    NN = "nn"
    NO = "no"
    NR = "nr"
    NV = "nv"
    NY = "ny"
    OC = "oc"
    OJ = "oj"
    OM = "om"
    OR = "or"
    OS = "os"
    PA = "pa"
    PI = "pi"
    PL = "pl"
    PS = "ps"
    PT = "pt"
    QU = "qu"
    RM = "rm"
    RN = "rn"
    RO = "ro"
    RU = "ru"
    RW = "rw"
    SA = "sa"
    SC = "sc"
    SD = "sd"
    SE = "se"
    SG = "sg"
    SI = "si"
    SK = "sk"
    SL = "sl"
    SM = "sm"
    SN = "sn"
    SO = "so"
    SQ = "sq"
    SR = "sr"
    SS = "ss"
    ST = "st"
    SU = "su"
    SV = "sv"
    SW = "sw"
    TA = "ta"
    TE = "te"
    TG = "tg"
    TH = "th"
    TI = "ti"
    TK = "tk"
    TL = "tl"
    TN = "tn"
    TO = "to"
    TR = "tr"
    TS = "ts"
    TT = "tt"
    TW = "tw"
    TY = "ty"
    UG = "ug"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VE = "ve"
    VI = "vi"
    VO = "vo"
    WA = "wa"
    WO = "wo"
    XH = "xh"
    YI = "yi"
    YO = "yo"
    ZA = "za"
    ZH = "zh"
    ZU = "zu"

    @classmethod
    def from_string(cls, text: str) -> "Language":
        """Parse a language identifier.

        Matches the code, the canonical name and every alternate spelling,
        ignoring case.

        Args:
            text: Language identifier (e.g., "es", "Spanish", "Español").

        Returns:
            Matching Language enum value.

        Raises:
            LanguageError: If text is not a known identifier. The error
                carries the closest known identifier as a suggestion.
        """
        language = _IDENTIFIER_LOOKUP.get(text.casefold())
        if language is not None:
            return language

        raise LanguageError(
            text,
            closest_match(text, _IDENTIFIERS, case_sensitive=False),
        )

    @property
    def code(self) -> str:
        """Two letter ISO 639-1 code."""
        return self.value

    @property
    def display_name(self) -> str:
        """Canonical English name of the language."""
        return _CATALOG[self.value][0]

    @property
    def alternatives(self) -> Tuple[str, ...]:
        """Alternate spellings, usually the native names."""
        return _CATALOG[self.value][1]

    @property
    def identifiers(self) -> Tuple[str, ...]:
        """Every identifier from_string() accepts for this language."""
        return (self.value, self.display_name, *self.alternatives)

    def display(self) -> str:
        """Return the canonical name, or the code if there is none."""
        return self.display_name or self.value

    def __str__(self) -> str:
        return self.display()


# code -> (canonical name, alternate spellings)
_CATALOG: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "aa": ("Afar", ("Afaraf",)),
    "ab": ("Abkhaz", ("аҧсшәа",)),
    "ae": ("Avestan", ("Avesta",)),
    "af": ("Afrikaans", ()),
    "ak": ("Akan", ()),
    "am": ("Amharic", ("አማርኛ",)),
    "an": ("Aragonese", ("aragonés",)),
    "ar": ("Arabic", ("العربية",)),
    "as": ("Assamese", ("অসমীয়া",)),
    "av": ("Avaric", ("авар мацӀ", "магӀарул мацӀ")),
    "ay": ("Aymara", ("aymar aru",)),
    "az": ("Azerbaijani", ("azərbaycan dili",)),
    "ba": ("Bashkir", ("башҡорт теле",)),
    "be": ("Belarusian", ("беларуская мова",)),
    "bg": ("Bulgarian", ("български език",)),
    "bh": ("Bihari", ("भोजपुरी",)),
    "bi": ("Bislama", ()),
    "bm": ("Bambara", ("bamanankan",)),
    "bn": ("Bengali", ("Bangla", "বাংলা")),
    "bo": ("Tibetan", ("Tibetan Standard", "བོད་ཡིག")),
    "br": ("Breton", ("brezhoneg",)),
    "bs": ("Bosnian", ("bosanski jezik",)),
    "ca": ("Catalan", ("català",)),
    "ce": ("Chechen", ("нохчийн мотт",)),
    "ch": ("Chamorro", ("Chamoru",)),
    "co": ("Corsican", ("corsu", "lingua corsa")),
    "cr": ("Cree", ("ᓀᐦᐃᔭᐍᐏᐣ",)),
    "cs": ("Czech", ("čeština", "český jazyk")),
    "cu": ("Church Slavonic", ("Old Church Slavonic", "Old Bulgarian", "ѩзыкъ словѣньскъ")),
    "cv": ("Chuvash", ("чӑваш чӗлхи",)),
    "cy": ("Welsh", ("Cymraeg",)),
    "da": ("Danish", ("dansk",)),
    "de": ("German", ("Deutsch",)),
    "dv": ("Divehi", ("Dhivehi", "Maldivian", "ދިވެހި")),
    "dz": ("Dzongkha", ("རྫོང་ཁ",)),
    "ee": ("Ewe", ("Eʋegbe",)),
    "el": ("Greek", ("Modern Greek", "ελληνικά")),
    "en": ("English", ()),
    "eo": ("Esperanto", ()),
    "es": ("Spanish", ("Español",)),
    "et": ("Estonian", ("eesti", "eesti keel")),
    "eu": ("Basque", ("euskara", "euskera")),
    "fa": ("Persian", ("Farsi", "فارسی")),
    "ff": ("Fula", ("Fulah", "Pulaar", "Pular", "Fulfulde")),
    "fi": ("Finnish", ("suomi", "suomen kieli")),
    "fj": ("Fijian", ("vosa Vakaviti",)),
    "fo": ("Faroese", ("føroyskt",)),
    "fr": ("French", ("français",)),
    "fy": ("Western Frisian", ("Frysk",)),
    "ga": ("Irish", ("Gaeilge",)),
    "gd": ("Scottish Gaelic", ("Gaelic", "Gàidhlig")),
    "gl": ("Galician", ("galego",)),
    "gn": ("Guaraní", ("Avañe'ẽ",)),
    "gu": ("Gujarati", ("ગુજરાતી",)),
    "gv": ("Manx", ("Gaelg", "Gailck")),
    "ha": ("Hausa", ("Hausa", "هَوُسَ")),
    "he": ("Hebrew", ("עברית",)),
    "hi": ("Hindi", ("हिन्दी", "हिंदी")),
    "ho": ("Hiri Motu", ()),
    "hr": ("Croatian", ("hrvatski jezik",)),
    "ht": ("Haitian", ("Haitian Creole", "Kreyòl ayisyen")),
    "hu": ("Hungarian", ("magyar",)),
    "hy": ("Armenian", ("Հայերեն",)),
    "hz": ("Herero", ("Otjiherero",)),
    "ia": ("Interlingua", ()),
    "id": ("Indonesian", ("Bahasa Indonesia",)),
    "ie": ("Interlingue", ("Occidental",)),
    "ig": ("Igbo", ("Asụsụ Igbo",)),
    "ii": ("Nuosu", ("ꆈꌠ꒿ Nuosuhxop",)),
    "ik": ("Inupiaq", ("Iñupiaq", "Iñupiatun")),
    "io": ("Ido", ()),
    "is": ("Icelandic", ("Íslenska",)),
    "it": ("Italian", ("Italiano",)),
    "iu": ("Inuktitut", ("ᐃᓄᒃᑎᑐᑦ",)),
    "ja": ("Japanese", ("日本語", "にほんご")),
    "jv": ("Javanese", ("ꦧꦱꦗꦮ", "Basa Jawa")),
    "ka": ("Georgian", ("ქართული",)),
    "kg": ("Kongo", ("Kikongo",)),
    "ki": ("Kikuyu", ("Gikuyu", "Gĩkũyũ")),
    "kj": ("Kwanyama", ("Kuanyama", "Kuanyama")),
    "kk": ("Kazakh", ("қазақ тілі",)),
    "kl": ("Kalaallisut", ("Greenlandic", "kalaallisut", "kalaallit oqaasii")),
    "km": ("Khmer", ("ខ្មែរ", "ខេមរភាសា", "ភាសាខ្មែរ")),
    "kn": ("Kannada", ("ಕನ್ನಡ",)),
    "ko": ("Korean", ("한국어",)),
    "kr": ("Kanuri", ()),
    "ks": ("Kashmiri", ("कश्मीरी", "كشميري")),
    "ku": ("Kurdish", ("Kurdî", "كوردی")),
    "kv": ("Komi", ("коми кыв",)),
    "kw": ("Cornish", ("Kernewek",)),
    "ky": ("Kyrgyz", ("Кыргызча", "Кыргыз тили")),
    "la": ("Latin", ("latine", "lingua latina")),
    "lb": ("Luxembourgish", ("Letzeburgesch", "Lëtzebuergesch")),
    "lg": ("Ganda", ("Luganda",)),
    "li": ("Limburgish", ("Limburgan", "Limburger", "Limburgs")),
    "ln": ("Lingala", ("Lingála",)),
    "lo": ("Lao", ("ພາສາລາວ",)),
    "lt": ("Lithuanian", ("lietuvių kalba",)),
    "lu": ("Luba-Katanga", ("Tshiluba",)),
    "lv": ("Latvian", ("latviešu valoda",)),
    "mg": ("Malagasy", ("fiteny malagasy",)),
    "mh": ("Marshallese", ("Kajin M̧ajeļ",)),
    "mi": ("Māori", ("te reo Māori",)),
    "mk": ("Macedonian", ("македонски јазик",)),
    "ml": ("Malayalam", ("മലയാളം",)),
    "mn": ("Mongolian", ("Монгол хэл",)),
    "mr": ("Marathi", ("Marāṭhī", "मराठी")),
    "ms": ("Malay", ("bahasa Melayu", "بهاس ملايو")),
    "mt": ("Maltese", ("Malti",)),
    "my": ("Burmese", ("ဗမာစာ",)),
    "na": ("Nauruan", ("Dorerin Naoero",)),
    "nb": ("Norwegian Bokmål", ("Norsk bokmål",)),
    "nd": ("Northern Ndebele", ("isiNdebele",)),
    "ne": ("Nepali", ("नेपाली",)),
    "ng": ("Ndonga", ("Owambo",)),
    "nl": ("Dutch", ("Nederlands", "Vlaams")),
    "nn": ("Norwegian Nynorsk", ("Norsk nynorsk",)),
    "no": ("Norwegian", ("Norsk",)),
    "nr": ("Southern Ndebele", ("isiNdebele",)),
    "nv": ("Navajo", ("Navaho", "Diné bizaad")),
    "ny": ("Chichewa", ("Chewa", "Nyanja", "chiCheŵa", "chinyanja")),
    "oc": ("Occitan", ("occitan", "lenga d'òc")),
    "oj": ("Ojibwe", ("Ojibwa", "ᐊᓂᔑᓈᐯᒧᐎᓐ")),
    "om": ("Oromo", ("Afaan Oromoo",)),
    "or": ("Oriya", ("ଓଡ଼ିଆ",)),
    "os": ("Ossetian", ("Ossetic", "ирон æвзаг")),
    "pa": ("Eastern Punjabi", ("ਪੰਜਾਬੀ",)),
    "pi": ("Pali", ("Pāli", "पाऴि")),
    "pl": ("Polish", ("język polski", "polszczyzna")),
    "ps": ("Pashto", ("Pushto", "پښتو")),
    "pt": ("Portuguese", ("Português",)),
    "qu": ("Quechua", ("Runa Simi", "Kichwa")),
    "rm": ("Romansh", ("rumantsch grischun",)),
    "rn": ("Kirundi", ("Ikirundi",)),
    "ro": ("Romanian", ("Română",)),
    "ru": ("Russian", ("Русский",)),
    "rw": ("Kinyarwanda", ("Ikinyarwanda",)),
    "sa": ("Sanskrit", ("Saṁskṛta", "संस्कृतम्")),
    "sc": ("Sardinian", ("sardu",)),
    "sd": ("Sindhi", ("सिन्धी", "سنڌي، سندھی")),
    "se": ("Northern Sami", ("Davvisámegiella",)),
    "sg": ("Sango", ("yângâ tî sängö",)),
    "si": ("Sinhalese", ("Sinhala", "සිංහල")),
    "sk": ("Slovak", ("slovenčina", "slovenský jazyk")),
    "sl": ("Slovene", ("slovenski jezik", "slovenščina")),
    "sm": ("Samoan", ("gagana fa'a Samoa",)),
    "sn": ("Shona", ("chiShona",)),
    "so": ("Somali", ("Soomaaliga", "af Soomaali")),
    "sq": ("Albanian", ("Shqip",)),
    "sr": ("Serbian", ("српски језик",)),
    "ss": ("Swati", ("SiSwati",)),
    "st": ("Southern Sotho", ("Sesotho",)),
    "su": ("Sundanese", ("Basa Sunda",)),
    "sv": ("Swedish", ("svenska",)),
    "sw": ("Swahili", ("Kiswahili",)),
    "ta": ("Tamil", ("தமிழ்",)),
    "te": ("Telugu", ("తెలుగు",)),
    "tg": ("Tajik", ("тоҷикӣ", "toçikī", "تاجیکی")),
    "th": ("Thai", ("ไทย",)),
    "ti": ("Tigrinya", ("ትግርኛ",)),
    "tk": ("Turkmen", ("Türkmen", "Түркмен")),
    "tl": ("Tagalog", ("Wikang Tagalog",)),
    "tn": ("Tswana", ("Setswana",)),
    "to": ("Tonga", ("Tonga Islands", "faka Tonga")),
    "tr": ("Turkish", ("Türkçe",)),
    "ts": ("Tsonga", ("Xitsonga",)),
    "tt": ("Tatar", ("татар теле", "tatar tele")),
    "tw": ("Twi", ()),
    "ty": ("Tahitian", ("Reo Tahiti",)),
    "ug": ("Uyghur", ("ئۇيغۇرچە", "Uyghurche")),
    "uk": ("Ukrainian", ("Українська",)),
    "ur": ("Urdu", ("اردو",)),
    "uz": ("Uzbek", ("Oʻzbek", "Ўзбек", "أۇزبېك")),
    "ve": ("Venda", ("Tshivenḓa",)),
    "vi": ("Vietnamese", ("Tiếng Việt",)),
    "vo": ("Volapük", ()),
    "wa": ("Walloon", ("walon",)),
    "wo": ("Wolof", ("Wollof",)),
    "xh": ("Xhosa", ("isiXhosa",)),
    "yi": ("Yiddish", ("ייִדיש",)),
    "yo": ("Yoruba", ("Yorùbá",)),
    "za": ("Zhuang", ("Chuang", "Saɯ cueŋƅ", "Saw cuengh")),
    "zh": ("Chinese", ("中文", "汉语", "漢語")),
    "zu": ("Zulu", ("isiZulu",)),
}

_IDENTIFIERS: Tuple[str, ...] = tuple(
    identifier for language in Language for identifier in language.identifiers
)

# Shared spellings (e.g. "isiNdebele") resolve to the first language listing them.
_IDENTIFIER_LOOKUP: Dict[str, Language] = {}
for _language in Language:
    for _identifier in _language.identifiers:
        _IDENTIFIER_LOOKUP.setdefault(_identifier.casefold(), _language)
del _language, _identifier
