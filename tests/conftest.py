# tests/conftest.py
import os

# Тестовое окружение задается до импорта приложения: конфигурация читается при импорте
os.environ['TESTING'] = 'true'
os.environ['LOG_FILE'] = ''
os.environ['RATE_LIMIT_MAX_REQUESTS'] = '100000'
os.environ['ALLOWED_ORIGINS'] = 'http://localhost:3000,https://tonewise.example'

import pytest
from fastapi.testclient import TestClient

from tests.test_di_container import StubChatGateway, get_test_container
from tonewise.infrastructure.di_container import get_analysis_service
from tonewise.services.analysis_service import AnalysisService


@pytest.fixture
def stub_gateway():
    """Gateway, записывающий промпты и возвращающий шаблонный ответ модели"""
    return StubChatGateway()


@pytest.fixture
def analysis_service(stub_gateway):
    return AnalysisService(gateway=stub_gateway)


@pytest.fixture
def test_container(stub_gateway):
    return get_test_container(stub_gateway)


@pytest.fixture
def app_client(analysis_service):
    """FastAPI тест клиент с подмененным AnalysisService"""
    from tonewise.main import app

    app.dependency_overrides[get_analysis_service] = lambda: analysis_service
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()
