import pytest

from services.knowledge_base import build_knowledge_base, load_knowledge_base


@pytest.fixture(scope="session")
def kb():
    return load_knowledge_base()


@pytest.fixture
def fake_kb():
    return build_knowledge_base(
        [
            {"code": "E100", "name": "Bad Dye", "category": "avoid", "description": "dye"},
            {"code": "E200", "name": "Meh Preservative", "category": "caution", "description": "preservative"},
            {"code": "E150d", "name": "Caramel", "category": "caution", "description": "color"},
            {"code": "E300", "name": "Vitamin C", "category": "safe", "description": "antioxidant"},
        ],
        {"ascorbic acid": "E300", "bad dye": "E100"},
        ["flavouring", "colour"],
        version="test",
    )
