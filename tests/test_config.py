from config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config


def test_get_config_by_name():
    assert get_config('testing') is TestingConfig
    assert get_config('production') is ProductionConfig
    assert get_config('nope') is DevelopmentConfig


def test_get_config_reads_flask_env(monkeypatch):
    monkeypatch.setenv('FLASK_ENV', 'production')
    assert get_config() is ProductionConfig
    monkeypatch.delenv('FLASK_ENV')
    assert get_config() is DevelopmentConfig


def test_testing_config_uses_memory_database(app):
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
    assert app.config['TESTING'] is True
    assert app.config['CURRENCY'] == TestingConfig.CURRENCY
