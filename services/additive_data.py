"""Bundled additive table (EU E-numbers, Turkish food regulations).

Category meaning:
  avoid   -> dangerous, always turns a product red
  caution -> moderate concern
  safe    -> naturally derived / low concern (still counts as an additive)
"""

KB_VERSION = "2024.1"

ADDITIVE_DATABASE = {
    # Dangerous additives (avoid)
    "E621": {
        "name": "Monosodyum Glutamat (MSG)",
        "category": "avoid",
        "description": "Yapay lezzet güçlendirici",
        "common_uses": "Çipler, hazır çorbalar, soslar",
        "health_concerns": "Baş ağrısı, alerjik reaksiyonlar, obezite riski",
    },
    "E951": {
        "name": "Aspartam",
        "category": "avoid",
        "description": "Yapay tatlandırıcı",
        "common_uses": "Diyet içecekler, şekersiz sakızlar",
        "health_concerns": "Kanser riski tartışmalı, baş ağrısı",
    },
    "E104": {
        "name": "Kinolin Sarısı",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Tatlılar, içecekler",
        "health_concerns": "Hiperaktivite, alerjik reaksiyonlar",
    },
    "E110": {
        "name": "Sunset Yellow (Gün Batımı Sarısı)",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Şekerlemeler, içecekler",
        "health_concerns": "Çocuklarda hiperaktivite, astım",
    },
    "E122": {
        "name": "Azorubin (Karmoizin)",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Jelatin, şekerlemeler",
        "health_concerns": "Alerjik reaksiyonlar, astım",
    },
    "E123": {
        "name": "Amarant",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Aperatifler, balık yumurtası",
        "health_concerns": "Kanser riski, çoğu ülkede yasaklı",
    },
    "E124": {
        "name": "Ponceau 4R (Kırmızı 2G)",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Sosisler, şekerlemeler",
        "health_concerns": "Alerjik reaksiyonlar, hiperaktivite",
    },
    "E127": {
        "name": "Eritrosin",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Kirazlar, tatlılar",
        "health_concerns": "Tiroid fonksiyonlarını etkileyebilir",
    },
    "E129": {
        "name": "Allura Red AC",
        "category": "avoid",
        "description": "Sentetik renklendirici",
        "common_uses": "Gazlı içecekler, şekerlemeler",
        "health_concerns": "Hiperaktivite, alerjiler",
    },
    "E211": {
        "name": "Sodyum Benzoat",
        "category": "avoid",
        "description": "Koruyucu",
        "common_uses": "Gazlı içecekler, soslar",
        "health_concerns": "C vitamini ile birlikte benzene dönüşebilir",
    },
    "E213": {
        "name": "Kalsiyum Benzoat",
        "category": "avoid",
        "description": "Koruyucu",
        "common_uses": "İçecekler, soslar",
        "health_concerns": "Alerjik reaksiyonlar",
    },
    "E249": {
        "name": "Potasyum Nitrit",
        "category": "avoid",
        "description": "Koruyucu",
        "common_uses": "Et ürünleri, sosis, salam",
        "health_concerns": "Kanser riski, nitrozamin oluşumu",
    },
    "E250": {
        "name": "Sodyum Nitrit",
        "category": "avoid",
        "description": "Koruyucu",
        "common_uses": "İşlenmiş et ürünleri",
        "health_concerns": "Kanser riski, nitrozamin oluşumu",
    },
    "E251": {
        "name": "Sodyum Nitrat",
        "category": "avoid",
        "description": "Koruyucu",
        "common_uses": "Sucuklar, et ürünleri",
        "health_concerns": "Kanser riski",
    },
    "E320": {
        "name": "Bütillenmiş Hidroksianisol (BHA)",
        "category": "avoid",
        "description": "Antioksidan",
        "common_uses": "Yağlar, bisküviler",
        "health_concerns": "Kanser riski, hormon bozucu",
    },
    "E321": {
        "name": "Bütillenmiş Hidroksitoluen (BHT)",
        "category": "avoid",
        "description": "Antioksidan",
        "common_uses": "Cipsler, çerezler",
        "health_concerns": "Kanser riski, hormon bozucu",
    },
    "E407": {
        "name": "Karagenan",
        "category": "avoid",
        "description": "Kıvam arttırıcı",
        "common_uses": "Süt ürünleri, dondurma",
        "health_concerns": "Bağırsak iltihabı, sindirim sorunları",
    },
    "E924": {
        "name": "Potasyum Bromat",
        "category": "avoid",
        "description": "Un iyileştirici",
        "common_uses": "Ekmek, hamur işleri",
        "health_concerns": "Kanser riski, çoğu ülkede yasaklı",
    },
    "E952": {
        "name": "Siklamat",
        "category": "avoid",
        "description": "Yapay tatlandırıcı",
        "common_uses": "Diyet ürünler",
        "health_concerns": "Kanser riski, ABD'de yasaklı",
    },

    # Caution additives
    "E102": {
        "name": "Tartrazin",
        "category": "caution",
        "description": "Sentetik renklendirici",
        "common_uses": "İçecekler, şekerlemeler",
        "health_concerns": "Astıma yatkın kişilerde reaksiyon",
    },
    "E200": {
        "name": "Sorbik Asit",
        "category": "caution",
        "description": "Koruyucu",
        "common_uses": "Peynir, ekmek, salamura",
    },
    "E202": {
        "name": "Potasyum Sorbat",
        "category": "caution",
        "description": "Koruyucu",
        "common_uses": "Soslar, turşu, reçel",
    },
    "E330": {
        "name": "Sitrik Asit",
        "category": "caution",
        "description": "Asitlik düzenleyici",
        "common_uses": "İçecekler, şekerlemeler",
        "health_concerns": "Yüksek miktarda diş minesine zarar",
    },
    "E331": {
        "name": "Sodyum Sitrat",
        "category": "caution",
        "description": "Asitlik düzenleyici",
        "common_uses": "Gazlı içecekler",
    },
    "E412": {
        "name": "Guar Gum",
        "category": "caution",
        "description": "Kıvam arttırıcı",
        "common_uses": "Dondurma, soslar",
        "health_concerns": "Sindirim sorunları yüksek miktarda",
    },
    "E415": {
        "name": "Ksantan Gum",
        "category": "caution",
        "description": "Kıvam arttırıcı",
        "common_uses": "Soslar, salata sosları",
    },
    "E422": {
        "name": "Gliserol",
        "category": "caution",
        "description": "Nemlendirici, tatlandırıcı",
        "common_uses": "Kekler, şekerlemeler",
    },
    "E450": {
        "name": "Difosfatlar",
        "category": "caution",
        "description": "Stabilizatör",
        "common_uses": "İşlenmiş et, peynir",
        "health_concerns": "Yüksek miktarda kalsiyum emilimi düşer",
    },
    "E451": {
        "name": "Trifosfatlar",
        "category": "caution",
        "description": "Stabilizatör",
        "common_uses": "Et ürünleri",
    },
    "E452": {
        "name": "Polifosfatlar",
        "category": "caution",
        "description": "Stabilizatör",
        "common_uses": "Deniz ürünleri, et",
        "health_concerns": "Mineral dengesini bozabilir",
    },
    "E471": {
        "name": "Mono ve Digliseritler",
        "category": "caution",
        "description": "Emülgatör",
        "common_uses": "Ekmek, margarin, dondurma",
    },
    "E950": {
        "name": "Asesülfam K",
        "category": "caution",
        "description": "Yapay tatlandırıcı",
        "common_uses": "Diyet içecekler",
    },
    "E955": {
        "name": "Sukraloz",
        "category": "caution",
        "description": "Yapay tatlandırıcı",
        "common_uses": "Diyet ürünler",
        "health_concerns": "Bağırsak bakterilerini etkileyebilir",
    },

    # Safe additives (still count as additives, never green)
    "E300": {
        "name": "Askorbik Asit (C Vitamini)",
        "category": "safe",
        "description": "Doğal antioksidan",
        "common_uses": "Meyve suları, konserveler",
    },
    "E440": {
        "name": "Pektin",
        "category": "safe",
        "description": "Doğal kıvam arttırıcı",
        "common_uses": "Reçel, marmelat",
    },
    "E414": {
        "name": "Arap Zamkı",
        "category": "safe",
        "description": "Doğal stabilizatör",
        "common_uses": "Şekerlemeler",
    },
}

# Ingredient names that identify an additive without its E-number.
# Order matters: aliases are tried top to bottom.
INGREDIENT_ALIASES = {
    "monosodyum glutamat": "E621",
    "msg": "E621",
    "aspartam": "E951",
    "sodyum benzoat": "E211",
    "sitrik asit": "E330",
    "askorbik asit": "E300",
    "c vitamini": "E300",
    "potasyum sorbat": "E202",
    "sorbik asit": "E200",
    "karagenan": "E407",
    "ksantan": "E415",
    "guar gum": "E412",
    "pektin": "E440",
    "sukraloz": "E955",
}

# Words that signal some additive is present even without a code.
ADDITIVE_KEYWORDS = [
    "aroma",
    "renklendirici",
    "koruyucu",
    "tatlandırıcı",
    "antioksidan",
    "kıvam",
    "emülgatör",
    "stabilizatör",
    "jelleştirici",
    "asitlik düzenleyici",
    "pekiştirici",
    "dolgu maddesi",
]
