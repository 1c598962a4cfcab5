"""
Static selection lists shown by the dashboard.

Departments, risk categories and value-chain steps are plain tuples so the
order on screen is the order declared here.
"""

DEPARTMENTS = (
    "Finans",
    "İnsan Kaynakları",
    "Bilgi Teknolojileri",
    "Satın Alma",
    "Üretim",
    "Satış ve Pazarlama",
    "Lojistik",
    "Hukuk",
)

RISKS = (
    "Operasyonel Risk",
    "Finansal Risk",
    "Stratejik Risk",
    "Uyum Riski",
    "İtibar Riski",
    "Siber Güvenlik Riski",
    "Tedarik Zinciri Riski",
    "Çevresel Risk",
)

VALUE_CHAIN_STEPS = (
    "Tedarik",
    "Gelen Lojistik",
    "Operasyonlar",
    "Giden Lojistik",
    "Pazarlama ve Satış",
    "Satış Sonrası Hizmetler",
)
