def test_products_command(app):
    result = app.test_cli_runner().invoke(args=["products"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines == ["1\tAmericano\t100", "2\tCappuccino\t110", "3\tEspresso\t90"]


def test_users_command_hides_passwords(app):
    result = app.test_cli_runner().invoke(args=["users"])
    assert result.exit_code == 0
    assert "zagreus" in result.output
    assert "hades" not in result.output
