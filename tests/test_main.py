from underwriting import main as cli


def test_approved_client_file(tmp_path, client_document, capsys):
    client_file = tmp_path / "client.txt"
    client_file.write_text(client_document(), encoding="utf-8")

    assert cli.main([str(client_file)]) == cli.EXIT_APPROVED
    out = capsys.readouterr().out
    assert "Файл успешно прочитан." in out
    assert "Заявка одобрена" in out


def test_rejected_client_file(tmp_path, client_document, years_ago, capsys):
    client_file = tmp_path / "client.txt"
    client_file.write_text(client_document(birth_date=years_ago(18)), encoding="utf-8")

    assert cli.main([str(client_file)]) == cli.EXIT_REJECTED
    out = capsys.readouterr().out
    assert "Отказ: возраст меньше 20 лет." in out
    assert "Отказ, сработала стоп проверка" in out


def test_missing_client_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert cli.main([str(missing)]) == cli.EXIT_FILE_NOT_FOUND
    assert f"Файл не найден по пути {missing}" in capsys.readouterr().out


def test_client_file_from_environment(tmp_path, client_document, monkeypatch, capsys):
    client_file = tmp_path / "from_env.txt"
    client_file.write_text(client_document(credit_history=None), encoding="utf-8")
    monkeypatch.setenv("CLIENT_FILE", str(client_file))

    assert cli.main([]) == cli.EXIT_REJECTED
    assert "не найдено обязательное поле" in capsys.readouterr().out
