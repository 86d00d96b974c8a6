"""Demo records loaded by ``geodex db seed``."""

from datetime import date
from decimal import Decimal

from .records import Gender

TURKIYE_CITIES = (
    "Adana", "Adıyaman", "Afyonkarahisar", "Ağrı", "Amasya", "Ankara", "Antalya",
    "Artvin", "Aydın", "Balıkesir", "Bilecik", "Bingöl", "Bitlis", "Bolu",
    "Burdur", "Bursa", "Çanakkale", "Çankırı", "Çorum", "Denizli", "Diyarbakır",
    "Edirne", "Elazığ", "Erzincan", "Erzurum", "Eskişehir", "Gaziantep",
    "Giresun", "Gümüşhane", "Hakkari", "Hatay", "Isparta", "Mersin", "İstanbul",
    "İzmir", "Kars", "Kastamonu", "Kayseri", "Kırklareli", "Kırşehir", "Kocaeli",
    "Konya", "Kütahya", "Malatya", "Manisa", "Kahramanmaraş", "Mardin", "Muğla",
    "Muş", "Nevşehir", "Niğde", "Ordu", "Rize", "Sakarya", "Samsun", "Siirt",
    "Sinop", "Sivas", "Tekirdağ", "Tokat", "Trabzon", "Tunceli", "Şanlıurfa",
    "Uşak", "Van", "Yozgat", "Zonguldak", "Aksaray", "Bayburt", "Karaman",
    "Kırıkkale", "Batman", "Şırnak", "Bartın", "Ardahan", "Iğdır", "Yalova",
    "Karabük", "Kilis", "Osmaniye", "Düzce",
)  # fmt: skip

USA_CITIES = (
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
    "Fort Worth", "Columbus", "Charlotte", "San Francisco", "Indianapolis",
    "Seattle", "Denver", "Washington", "Boston", "El Paso", "Nashville",
    "Detroit", "Oklahoma City", "Portland", "Las Vegas", "Memphis", "Louisville",
    "Baltimore", "Milwaukee", "Albuquerque", "Tucson", "Fresno", "Mesa",
    "Sacramento", "Atlanta", "Kansas City", "Colorado Springs", "Miami",
    "Raleigh", "Omaha", "Long Beach", "Virginia Beach", "Oakland", "Minneapolis",
    "Tulsa", "Arlington", "New Orleans",
)  # fmt: skip

#: Country name -> city names, in insertion order. China has no cities.
LOCATIONS: dict[str, tuple[str, ...]] = {
    "Türkiye": TURKIYE_CITIES,
    "United States of America": USA_CITIES,
    "China": (),
}

ROLES = ("Admin", "User")

GROUP_TITLE = "General"

#: User fields; ``role`` names one of ROLES.
USERS = (
    {
        "user_name": "admin",
        "password": "admin",
        "first_name": "Çağıl",
        "last_name": "Alsaç",
        "gender": Gender.MAN,
        "birth_date": date(1980, 8, 21),
        "score": Decimal("3.8"),
        "is_active": True,
        "address": "Çankaya",
        "country_id": 1,
        "city_id": 1,
        "role": "Admin",
    },
    {
        "user_name": "user",
        "password": "user",
        "first_name": "Luna",
        "last_name": "Leo",
        "gender": Gender.WOMAN,
        "birth_date": date(2004, 9, 13),
        "score": Decimal("4.7"),
        "is_active": True,
        "address": None,
        "country_id": 2,
        "city_id": 1,
        "role": "User",
    },
)
