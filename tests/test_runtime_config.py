import configparser

import runtime_config


def _point_to(tmp_path, monkeypatch):
    main = tmp_path / "config.ini"
    runtime = tmp_path / "config.runtime.ini"
    main.write_text("[INVENTORY]\ndata_path = data/store.json\nlanguage = hi\n", encoding="utf-8")
    monkeypatch.setattr(runtime_config, "CONFIG_MAIN_PATH", main)
    monkeypatch.setattr(runtime_config, "CONFIG_RUNTIME_PATH", runtime)
    return runtime


def test_runtime_values_override_base(tmp_path, monkeypatch):
    runtime = _point_to(tmp_path, monkeypatch)
    runtime.write_text("[INVENTORY]\nlanguage = en\n\n[SEARCH]\nresult_limit = 20\n", encoding="utf-8")

    cfg = runtime_config.load_merged_config()
    assert cfg.get("INVENTORY", "language") == "en"
    assert cfg.get("INVENTORY", "data_path") == "data/store.json"
    assert cfg.getint("SEARCH", "result_limit") == 20


def test_missing_runtime_file_is_ignored(tmp_path, monkeypatch):
    _point_to(tmp_path, monkeypatch)
    cfg = runtime_config.load_merged_config()
    assert cfg.get("INVENTORY", "language") == "hi"


def test_inventory_data_path_relative_and_env(tmp_path, monkeypatch):
    monkeypatch.delenv("MUNAFA_DATA_PATH", raising=False)
    cfg = configparser.ConfigParser()
    cfg.read_dict({"INVENTORY": {"data_path": "data/shop.json"}})
    assert runtime_config.inventory_data_path(cfg) == runtime_config.BASE_DIR / "data" / "shop.json"

    monkeypatch.setenv("MUNAFA_DATA_PATH", str(tmp_path / "other.json"))
    assert runtime_config.inventory_data_path(cfg) == tmp_path / "other.json"


def test_inventory_data_path_default():
    cfg = configparser.ConfigParser()
    path = runtime_config.inventory_data_path(cfg)
    assert path.name == "store.json"
