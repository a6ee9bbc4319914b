import pytest

import mongodock.modules.database as database_module
from mongodock.modules.database import add_database, get_database_info
from mongodock.modules.mongo import (
    ADMIN_USERS_SCRIPT,
    CREATE_DATABASE_SCRIPT,
    DATABASE_INFO_SCRIPT,
    ENV_DATABASE,
    LIST_DATABASES_SCRIPT,
    build_mongosh_command,
    get_user_databases,
    show_user_databases,
)


def test_mongosh_command_names_parameters_but_not_values(settings):
    command = build_mongosh_command(settings, CREATE_DATABASE_SCRIPT, {ENV_DATABASE: "shop'); db.dropDatabase('admin"})

    assert command == [
        "docker", "exec", "-i", "-e", ENV_DATABASE,
        "my-mongodb", "mongosh", "--quiet", "--eval", CREATE_DATABASE_SCRIPT,
    ]
    assert not any("shop" in arg for arg in command)


def test_scripts_read_operator_values_from_environment():
    assert f"process.env.{ENV_DATABASE}" in CREATE_DATABASE_SCRIPT
    assert "'local'" in LIST_DATABASES_SCRIPT and "'config'" in LIST_DATABASES_SCRIPT


@pytest.mark.parametrize("answer", ["", "   "])
def test_add_database_rejects_empty_name(settings, fake_docker, monkeypatch, scripted_input, answer, capsys):
    docker = fake_docker(running=True)
    monkeypatch.setattr(database_module, "text_input", scripted_input(answer))

    add_database(settings)

    assert docker.subcommands == ["ps"]
    assert "Database name cannot be empty." in capsys.readouterr().out


def test_add_database_rejects_invalid_name(settings, fake_docker, monkeypatch, scripted_input, capsys):
    docker = fake_docker(running=True)
    monkeypatch.setattr(database_module, "text_input", scripted_input("my.db"))

    add_database(settings)

    assert docker.subcommands == ["ps"]
    assert "ERROR E3005" in capsys.readouterr().out


def test_add_database_requires_running_container(settings, fake_docker, monkeypatch, scripted_input):
    docker = fake_docker(running=False)
    prompts = scripted_input("shop")
    monkeypatch.setattr(database_module, "text_input", prompts)

    add_database(settings)

    assert docker.subcommands == ["ps"]
    assert prompts.prompts == []


def test_add_database_passes_name_out_of_band(settings, fake_docker, monkeypatch, scripted_input, capsys):
    docker = fake_docker(running=True)
    monkeypatch.setattr(database_module, "text_input", scripted_input("  shop  "))

    add_database(settings)

    exec_calls = docker.calls_for("exec")
    assert len(exec_calls) == 1
    assert exec_calls[0][-1] == CREATE_DATABASE_SCRIPT
    assert docker.envs[-1][ENV_DATABASE] == "shop"
    assert "Database 'shop' created successfully." in capsys.readouterr().out


def test_add_database_failure_is_reported(settings, fake_docker, monkeypatch, scripted_input, capsys):
    fake_docker(running=True, returncodes={"exec": 1})
    monkeypatch.setattr(database_module, "text_input", scripted_input("shop"))

    add_database(settings)

    out = capsys.readouterr().out
    assert "ERROR E3001" in out
    assert "created successfully" not in out


def test_get_user_databases_skips_blank_lines(settings, fake_docker):
    docker = fake_docker(running=True, stdout={"exec": "admin\n\nshop\n"})

    assert get_user_databases(settings) == ["admin", "shop"]
    assert docker.calls_for("exec")[0][-1] == LIST_DATABASES_SCRIPT


def test_blank_database_listing_reports_no_user_databases(settings, fake_docker, capsys):
    fake_docker(running=True, stdout={"exec": "  \n"})

    assert show_user_databases(settings) == []
    assert "No user-created databases found yet." in capsys.readouterr().out


def test_database_listing_failure_returns_none(settings, fake_docker, capsys):
    fake_docker(running=True, returncodes={"exec": 1}, stderr={"exec": "MongoServerError"})

    assert show_user_databases(settings) is None
    assert "ERROR E3004" in capsys.readouterr().out


def test_get_database_info_requires_running_container(settings, fake_docker, capsys):
    docker = fake_docker(running=False)

    get_database_info(settings)

    assert docker.subcommands == ["ps"]
    assert "ERROR E2002" in capsys.readouterr().out


def test_get_database_info_lists_admins_then_databases(settings, fake_docker, capsys):
    docker = fake_docker(running=True)

    get_database_info(settings)

    scripts = [call[-1] for call in docker.calls_for("exec")]
    assert scripts == [ADMIN_USERS_SCRIPT, DATABASE_INFO_SCRIPT]
    out = capsys.readouterr().out
    assert "mongodb://localhost:27017/" in out
    assert "Finished retrieving database information." in out
