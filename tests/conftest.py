# tests/conftest.py
import pytest
from pathlib import Path
from lear.prompts.prompt_manager import PromptManager
from lear.prompts.limerick_prompts import LimerickPromptBuilder
from lear.llm.base_llm import MockLLM, LLMConfig
from lear.config.config_manager import ServiceConfig, ServerConfig, ProviderConfig

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")

@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root path"""
    return Path(__file__).parent.parent

@pytest.fixture
def prompt_manager():
    """PromptManager using the bundled templates directory"""
    return PromptManager()

@pytest.fixture
def prompt_builder(prompt_manager):
    return LimerickPromptBuilder(prompt_manager)

@pytest.fixture
def mock_llm():
    """Mock LLM provider without canned responses"""
    return MockLLM(LLMConfig(model_name="test-model"))

@pytest.fixture
def make_llm():
    """Factory for a MockLLM returning the given responses in order"""
    def _make(*responses):
        return MockLLM(LLMConfig(model_name="test-model"), responses=list(responses))
    return _make

@pytest.fixture
def service_config():
    """Service configuration that never touches the network or disk"""
    return ServiceConfig(
        llm=ProviderConfig(provider="mock", model="test-model"),
        server=ServerConfig(static_dir=None)
    )

# Sample limericks for the key "ABCDE"

@pytest.fixture
def abcde_limerick():
    return (
        "1) A builder who worked on an Arch\n"
        "Set off with his plans in a Beam;\n"
        "He carved a fine Corbel\n"
        "Then polished a Dome,\n"
        "And rested at last by the Eave."
    )

@pytest.fixture
def abcde_limerick_wrong_line_three():
    return (
        "1) A builder who worked on an Arch\n"
        "Set off with his plans in a Beam;\n"
        "He carved a fine Pier\n"
        "Then polished a Dome,\n"
        "And rested at last by the Eave."
    )
