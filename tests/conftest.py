"""
Pytest configuration and fixtures
"""
import pytest
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def path_payload():
    """A schema-conforming generation response (wire format)"""
    return {
        "summary": "A 12-week route from zero to confident with data structures.",
        "steps": [
            {
                "id": "s1",
                "title": "Foundations of Algorithmics",
                "description": "Complexity, recursion and arrays.",
                "duration": "2 weeks",
                "academyName": "USTHB",
                "courseLink": "https://www.usthb.dz/algo1",
                "isUniversityModule": True,
            },
            {
                "id": "s2",
                "title": "Linked Lists and Stacks",
                "description": "Pointer-based structures in C.",
                "duration": "3 weeks",
                "academyName": "Vodev",
                "courseLink": "https://vodev.dz/courses/ds",
                "isUniversityModule": False,
            },
            {
                "id": "s3",
                "title": "Trees and Graphs",
                "description": "BST, heaps, BFS and DFS.",
                "duration": "4 weeks",
                "academyName": "ESI",
                "courseLink": "https://www.esi.dz/ds2",
                "isUniversityModule": True,
            },
        ],
        "forwardLookingSentence": "Every structure you master today is a tool you will reach for tomorrow.",
    }


@pytest.fixture
def learning_path(path_payload):
    """Validated LearningPath built from path_payload"""
    from learning_path_copilot.path.schemas import LearningPath
    return LearningPath.model_validate(path_payload)


@pytest.fixture
def path_input():
    """Form values from the data structures scenario"""
    from learning_path_copilot.path.schemas import LearningPathInput, ProficiencyLevel
    return LearningPathInput(
        goal="Learn Data Structures",
        deadline="2024-12-01",
        level=ProficiencyLevel.BEGINNER,
        availability=5,
    )


@pytest.fixture
def mock_llm():
    """Mock chat model whose ainvoke returns an AIMessage-like object"""
    llm = MagicMock()
    response = MagicMock()
    response.content = ""
    llm.ainvoke = AsyncMock(return_value=response)
    return llm


@pytest.fixture
def mock_llm_factory(mock_llm):
    """Factory returning mock_llm, accepting any keyword arguments"""
    return MagicMock(return_value=mock_llm)
