"""Static Hindi/English term table for kirana store products.

Keys are transliterated Hindi roots (plus a few brand and English words that
shopkeepers type as-is); values list English equivalents and alternate
spellings. The reverse direction is derived in :mod:`shabdkosh.dictionary`.
"""

from __future__ import annotations

from typing import Dict, List

HINDI_TO_ENGLISH: Dict[str, List[str]] = {
    # Salt
    "namak": ["salt", "noon", "sendha"],
    "noon": ["salt", "namak"],

    # Sugar & sweeteners
    "cheeni": ["sugar", "chini"],
    "shakkar": ["sugar", "jaggery", "gur"],
    "gur": ["jaggery", "shakkar", "gud"],
    "mishri": ["rock sugar", "crystal sugar", "misri"],
    "shahad": ["honey", "madhu"],

    # Rice & grains
    "chawal": ["rice", "basmati", "chaval"],
    "basmati": ["rice", "chawal"],
    "gehun": ["wheat", "gehoon"],

    # Flour
    "atta": ["flour", "wheat flour", "aata"],
    "maida": ["refined flour", "all purpose flour", "white flour"],
    "besan": ["gram flour", "chickpea flour"],
    "suji": ["semolina", "rava", "sooji"],
    "rava": ["semolina", "suji"],

    # Lentils & pulses
    "dal": ["lentils", "pulses", "daal"],
    "chana": ["chickpea", "gram", "chole"],
    "rajma": ["kidney beans", "rajmah"],
    "moong": ["mung bean", "green gram", "moong dal"],
    "urad": ["black gram", "urad dal"],
    "toor": ["pigeon pea", "arhar", "toor dal"],
    "masoor": ["red lentils", "masur"],
    "kabuli": ["chickpea", "white chana", "kabuli chana"],

    # Oils
    "tel": ["oil", "cooking oil"],
    "sarson": ["mustard oil", "sarson ka tel"],
    "soyabean": ["soybean oil", "soya"],
    "mungfali": ["groundnut oil", "peanut oil"],
    "til": ["sesame oil", "gingelly"],
    "nariyal": ["coconut oil", "coconut"],

    # Ghee & butter
    "ghee": ["clarified butter", "desi ghee"],
    "makhan": ["butter", "makkhan"],

    # Dairy
    "doodh": ["milk", "dudh"],
    "dahi": ["curd", "yogurt", "yoghurt"],
    "paneer": ["cottage cheese", "indian cheese"],

    # Spices
    "masala": ["spice", "spices", "masale"],
    "mirch": ["chilli", "chili", "pepper", "mirchi"],
    "lalmirch": ["red chilli", "red chili", "lal mirch"],
    "kaali": ["black pepper", "kali mirch"],
    "haldi": ["turmeric", "haldi powder"],
    "jeera": ["cumin", "zeera", "jira"],
    "dhania": ["coriander", "dhaniya"],
    "rai": ["mustard seeds", "sarson"],
    "methi": ["fenugreek", "kasuri methi"],
    "ajwain": ["carom seeds", "ajvain"],
    "heeng": ["asafoetida", "hing"],
    "dalchini": ["cinnamon", "dalcheeni"],
    "laung": ["cloves", "lavang"],
    "elaichi": ["cardamom", "ilaichi", "elaichi"],
    "javitri": ["mace", "jawitri"],
    "jaiphal": ["nutmeg", "jaaiphal"],
    "tejpatta": ["bay leaf", "tej patta"],
    "kesar": ["saffron", "keshar"],

    # Tea & coffee
    "chai": ["tea", "chay", "chaya"],
    "patti": ["tea leaves", "chai patti"],
    "coffee": ["kaapi", "kafi", "kofi"],

    # Vegetables
    "aloo": ["potato", "alu"],
    "pyaaz": ["onion", "pyaj", "kanda"],
    "tamatar": ["tomato", "tamater"],
    "lahsun": ["garlic", "lasun"],
    "adrak": ["ginger", "adrakh"],

    # Snacks & misc
    "namkeen": ["snacks", "savory", "namkin"],
    "biscuit": ["cookies", "biscuits", "biskut"],
    "chips": ["crisps", "wafers"],
    "papad": ["papadum", "pappad"],
    "achar": ["pickle", "achaar"],

    # Cleaning
    "sabun": ["soap", "saabun"],
    "shampoo": ["shampoo"],
    "detergent": ["washing powder", "surf", "rin"],

    # Brands often typed in Hindi
    "tata": ["tata"],
    "ashirvaad": ["ashirwad", "aashirvaad"],
    "fortune": ["fortune"],
    "saffola": ["saffola"],
    "patanjali": ["patanjali"],
}
