"""Static English → Urdu word table used by the glossator.

Hand-curated and deliberately small: most words in an arbitrary article are
not in it.  Keys are lowercase ASCII letters only, matching
:func:`backend.summary.glossator.lookup_key`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

URDU_DICTIONARY: Mapping[str, str] = MappingProxyType({
    "this": "یہ",
    "is": "ہے",
    "a": "ایک",
    "blog": "بلاگ",
    "about": "کے بارے میں",
    "summary": "خلاصہ",
    "introduction": "تعارف",
    "to": "تک",
    "react": "ری ایکٹ",
    "hooks": "ہکس",
    "you": "آپ",
    "can": "سکتے ہیں",
    "use": "استعمال کریں",
    "function": "فنکشن",
    "functions": "افعال",
    "state": "حالت",
    "component": "جزو",
    "components": "اجزاء",
    "manage": "انتظام کریں",
    "data": "ڈیٹا",
    "without": "بغیر",
    "class": "کلاس",
    "based": "پر مبنی",
    "code": "کوڈ",
    "easier": "آسان تر",
    "reuse": "دوبارہ استعمال",
    "logic": "منطق",
    "share": "بانٹیں",
    "between": "کے درمیان",
    "different": "مختلف",
    "applications": "ایپلیکیشنز",
    "intuitive": "بدیہی",
    "powerful": "طاقتور",
    "simplify": "آسان بنائیں",
    "development": "ترقی",
    "javascript": "جاوا اسکرپٹ",
    "web": "ویب",
    "interface": "انٹرفیس",
    "interactive": "انٹرایکٹو",
    "content": "مواد",
    "create": "بنائیں",
    "page": "صفحہ",
    "user": "صارف",
    "modern": "جدید",
    "and": "اور",
    "for": "کے لیے",
    "with": "کے ساتھ",
})
