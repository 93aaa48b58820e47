import json

from click.testing import CliRunner

from mvp_creator.cli import cli


def test_create_with_options(app_dir, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "create",
            "--root", str(app_dir),
            "--project-root", str(tmp_path),
            "--package", "com.app.bluetooth",
            "--base",
        ],
    )

    assert result.exit_code == 0
    assert "MVP package created: com.app.bluetooth" in result.output
    assert (app_dir / "base" / "BasePresenter.java").exists()
    assert (app_dir / "bluetooth" / "BluetoothActivity.java").exists()


def test_create_prompts_for_missing_values(app_dir, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["create", "--root", str(app_dir), "--project-root", str(tmp_path)],
        input="com.app.login\nn\n",
    )

    assert result.exit_code == 0
    assert (app_dir / "login" / "ILoginContract.java").exists()
    assert not (app_dir / "base").exists()


def test_create_prompt_defaults_to_saved_preferences(app_dir, tmp_path):
    (tmp_path / ".mvp-creator.json").write_text(
        json.dumps({"mvp_creator_last_package": "com.app.saved", "mvp_creator_last_base_option": True})
    )

    runner = CliRunner()
    result = runner.invoke(cli, ["create", "--root", str(app_dir), "--project-root", str(tmp_path)], input="\n\n")

    assert result.exit_code == 0
    assert "com.app.saved" in result.output
    assert (app_dir / "saved" / "SavedPresenter.java").exists()
    assert (app_dir / "base" / "BaseView.java").exists()


def test_create_reports_skipped_files(app_dir, tmp_path):
    args = ["create", "--root", str(app_dir), "--project-root", str(tmp_path), "--package", "bluetooth", "--no-base"]
    runner = CliRunner()
    runner.invoke(cli, args)

    result = runner.invoke(cli, args)

    assert result.exit_code == 0
    assert "File BluetoothModel.java already exists - skipped" in result.output


def test_create_blank_package_fails(app_dir, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["create", "--root", str(app_dir), "--project-root", str(tmp_path), "--package", "   ", "--no-base"],
    )

    assert result.exit_code == 1
    assert "blank" in result.output
    assert list(app_dir.iterdir()) == []
    assert not (tmp_path / ".mvp-creator.json").exists()


def test_create_with_search_strategy(source_root, tmp_path):
    start = source_root / "com" / "app" / "features"
    start.mkdir(parents=True)
    base = source_root / "com" / "app" / "base"
    base.mkdir()
    (base / "BasePresenter.java").write_text("")
    (base / "BaseView.java").write_text("")

    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "create",
            "--root", str(start),
            "--project-root", str(tmp_path),
            "--package", "login",
            "--no-base",
            "--search", "sibling",
        ],
    )

    assert result.exit_code == 0
    assert "BaseView" not in (start / "login" / "ILoginContract.java").read_text()


def test_prefs_show(app_dir, tmp_path):
    runner = CliRunner()
    runner.invoke(
        cli,
        ["create", "--root", str(app_dir), "--project-root", str(tmp_path), "--package", "com.app.bluetooth", "--base"],
    )

    result = runner.invoke(cli, ["prefs", "show", "--project-root", str(tmp_path)])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"mvp_creator_last_package": "com.app.bluetooth", "mvp_creator_last_base_option": True}


def test_preview(app_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ["preview", "--root", str(app_dir), "--package", "bluetooth", "--base"])

    assert result.exit_code == 0
    assert "// ===== IBluetoothContract.java =====" in result.output
    assert "package com.app.bluetooth;" in result.output
    assert list(app_dir.iterdir()) == []


def test_preview_invalid_package(app_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ["preview", "--root", str(app_dir), "--package", "com.app."])

    assert result.exit_code == 1
    assert "Invalid package name" in result.output


def test_config_option(app_dir, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("author: config-author\n")

    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["--config", str(config), "preview", "--root", str(app_dir), "--package", "bluetooth"],
    )

    assert result.exit_code == 0
    assert "Author: config-author" in result.output


def test_invalid_config_exits(app_dir, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("unknown: 1\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(config), "preview", "--root", str(app_dir), "--package", "bluetooth"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_create_reports_preference_save_failure(app_dir, tmp_path):
    (tmp_path / ".mvp-creator.json").mkdir()

    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["create", "--root", str(app_dir), "--project-root", str(tmp_path), "--package", "bluetooth", "--no-base"],
    )

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Failed to save preferences" in result.output
    assert list(app_dir.iterdir()) == []
