from pathlib import Path

import pytest

from smartmessages_lib import DataError, ParameterError
from smartmessages_lib.operations import OPERATIONS, Operation, Param


ID_CASES = [
    ("get_list", (0,)),
    ("update_list", (0, "Nome", "Descricao", True)),
    ("delete_list", (-1,)),
    ("get_list_unsubs", (0,)),
    ("upload_list", (0, "lista.csv", "site")),
    ("get_upload_info", (0, 1)),
    ("get_upload_info", (1, 0)),
    ("get_uploads", (-3,)),
    ("cancel_upload", (1, -1)),
    ("subscribe", ("fulano@gmail.com", 0)),
    ("unsubscribe", ("fulano@gmail.com", -2)),
    ("add_subscription", ("fulano@gmail.com", 0)),
    ("delete_subscription", ("fulano@gmail.com", 0)),
    ("update_campaign", (0, "Nome")),
    ("delete_campaign", (0,)),
    ("get_campaign_mailshots", (0,)),
    ("get_mailshot", (0,)),
    ("get_mailshot_clicks", (0,)),
    ("get_mailshot_opens", (-1,)),
    ("get_mailshot_unsubs", (0,)),
    ("get_mailshot_bounces", (0,)),
    ("send_mailshot", (0, 1)),
    ("send_mailshot", (1, 0)),
    ("get_template", (0,)),
    ("update_template", (0, "Nome", "<p>oi</p>", "oi", "Assunto")),
    ("delete_template", (-5,)),
]


@pytest.mark.parametrize("method,args", ID_CASES)
def test_non_positive_identifiers_fail_before_network(logged_client, transport, method, args):
    with pytest.raises(ParameterError):
        getattr(logged_client, method)(*args)
    assert transport.call_count == 0


EMAIL_CASES = [
    ("subscribe", ("   ", 1)),
    ("unsubscribe", ("", 1)),
    ("add_subscription", ("\t", 1)),
    ("delete_subscription", (" \n", 1)),
    ("get_user_info", ("  ",)),
    ("set_user_info", ("", {"firstname": "Ana"})),
]


@pytest.mark.parametrize("method,args", EMAIL_CASES)
def test_blank_addresses_fail_before_network(logged_client, transport, method, args):
    with pytest.raises(ParameterError):
        getattr(logged_client, method)(*args)
    assert transport.call_count == 0


def test_subscribe_trims_address_and_maps_fields(logged_client, transport):
    assert logged_client.subscribe("  fulano@gmail.com ", 12, "Sr. Fulano", "Fulano", "Silva") is True

    params = transport.last.params
    assert transport.last.url.endswith("/subscribe")
    assert params["address"] == "fulano@gmail.com"
    assert params["listid"] == 12
    assert params["name"] == "Sr. Fulano"
    assert params["firstname"] == "Fulano"
    assert params["lastname"] == "Silva"


def test_server_refusal_raises_data_error(logged_client, transport):
    transport.queue({"status": False, "errorcode": 4, "msg": "Address suppressed"})
    with pytest.raises(DataError) as exc:
        logged_client.subscribe("fulano@gmail.com", 12)
    assert exc.value.code == 4
    assert "Address suppressed" in str(exc.value)


def test_set_user_info_flattens_mapping(logged_client, transport):
    logged_client.set_user_info("fulano@gmail.com", {"firstname": "Ana", "country": "BR"})

    params = transport.last.params
    assert params["userinfo[firstname]"] == "Ana"
    assert params["userinfo[country]"] == "BR"


def test_set_user_info_requires_mapping(logged_client, transport):
    with pytest.raises(ParameterError):
        logged_client.set_user_info("fulano@gmail.com", ["Ana"])
    assert transport.call_count == 0


def test_field_order_round_trip(logged_client, transport):
    transport.queue({"status": True, "fields": ["emailaddress", "firstname"]})
    ordem = logged_client.set_field_order(["emailaddress", "firstname", "campoinexistente"])

    assert transport.last.params["fields"] == "emailaddress,firstname,campoinexistente"
    assert ordem == ["emailaddress", "firstname"]

    transport.queue({"status": True, "fields": ["emailaddress", "firstname"]})
    assert logged_client.get_field_order() == ordem


@pytest.mark.parametrize("fields", [[], ["firstname", "lastname"]])
def test_field_order_requires_emailaddress(logged_client, transport, fields):
    with pytest.raises(ParameterError):
        logged_client.set_field_order(fields)
    assert transport.call_count == 0


def test_upload_list_missing_file(logged_client, transport, tmp_path):
    with pytest.raises(ParameterError):
        logged_client.upload_list(5, tmp_path / "nao_existe.csv", "site")
    assert transport.call_count == 0


def test_upload_list_file_too_small(logged_client, transport, tmp_path):
    arquivo = tmp_path / "pequeno.csv"
    arquivo.write_bytes(b"a@b.c")
    with pytest.raises(ParameterError):
        logged_client.upload_list(5, arquivo, "site")
    assert transport.call_count == 0


def test_upload_list_returns_upload_id(logged_client, transport, tmp_path):
    arquivo = tmp_path / "lista.csv"
    arquivo.write_text("fulano@gmail.com\nciclano@gmail.com\n", encoding="utf-8")
    transport.queue({"status": True, "uploadid": 42})

    upload_id = logged_client.upload_list(5, str(arquivo), "Formulario do site", definitive=True)

    assert upload_id == 42
    call = transport.last
    assert call.method == "POST"
    assert call.url.endswith("/uploadlist")
    assert call.data["method"] == "uploadlist"
    assert call.data["listid"] == 5
    assert call.data["source"] == "Formulario do site"
    assert call.data["definitive"] == 1
    assert call.data["replace"] == 0
    assert call.data["fieldorderfirstline"] == 0
    assert call.data["accesskey"] == "abc123"
    assert call.files == {"lista.csv": arquivo.read_bytes()}


def test_get_list_as_csv_returns_raw_body(logged_client, transport):
    csv_body = "emailaddress,firstname\nfulano@gmail.com,Fulano\n"
    transport.queue(text=csv_body)

    assert logged_client.get_list(3) == csv_body
    assert transport.last.params["ascsv"] == 1


def test_get_list_structured_returns_nested_list(logged_client, transport):
    registros = {"101": {"emailaddress": "fulano@gmail.com"}}
    transport.queue({"status": True, "list": registros, "msg": ""})

    assert logged_client.get_list(3, as_csv=False) == registros
    assert transport.last.params["ascsv"] == 0


@pytest.mark.parametrize("method,key", [
    ("get_mailshot_clicks", "clicks"),
    ("get_mailshot_opens", "opens"),
    ("get_mailshot_unsubs", "unsubs"),
    ("get_mailshot_bounces", "bounces"),
])
def test_mailshot_reports_structured_and_csv(logged_client, transport, method, key):
    transport.queue({"status": True, key: {"1": {"address": "fulano@gmail.com"}}})
    assert getattr(logged_client, method)(8) == {"1": {"address": "fulano@gmail.com"}}
    assert transport.last.params["mailshotid"] == 8

    transport.queue(text="address\nfulano@gmail.com\n")
    assert getattr(logged_client, method)(8, as_csv=True) == "address\nfulano@gmail.com\n"


def test_add_list_returns_new_id(logged_client, transport):
    transport.queue({"status": True, "listid": "17"})
    assert logged_client.add_list("  Clientes  ", " Todos os clientes ", visible=False) == 17

    params = transport.last.params
    assert params["name"] == "Clientes"
    assert params["description"] == "Todos os clientes"
    assert params["visible"] == 0


def test_add_list_requires_name(logged_client, transport):
    with pytest.raises(ParameterError):
        logged_client.add_list("   ")
    assert transport.call_count == 0


def test_set_callback_url_validates_url(logged_client, transport):
    for invalid in ("", "callback.php", "ftp://files.example.org/cb", "http://"):
        with pytest.raises(ParameterError):
            logged_client.set_callback_url(invalid)
    assert transport.call_count == 0

    assert logged_client.set_callback_url("https://meusite.com.br/callback") is True
    assert transport.last.params["url"] == "https://meusite.com.br/callback"


def test_validate_address_locally_needs_no_session(client, transport):
    assert client.validate_address("fulano@gmail.com") is True
    assert client.validate_address("sem-arroba") is False
    assert client.validate_address("") is False
    assert transport.call_count == 0


def test_validate_address_remotely(logged_client, transport):
    transport.queue({"status": True, "valid": 1})
    assert logged_client.validate_address("fulano@gmail.com", remote=True) is True
    assert transport.last.url.endswith("/validateaddress")


def test_campaign_lifecycle(logged_client, transport):
    transport.queue({"status": True, "campaignid": 31})
    assert logged_client.add_campaign("Black Friday") == 31

    logged_client.update_campaign(31, "Black Friday 2024")
    assert transport.last.params == {
        "campaignid": 31, "name": "Black Friday 2024", "accesskey": "abc123",
    }

    transport.queue({"status": True, "mailshots": {"5": {"id": 5}}})
    assert logged_client.get_campaign_mailshots(31) == {"5": {"id": 5}}

    assert logged_client.delete_campaign(31) is True


def test_send_mailshot(logged_client, transport):
    transport.queue({"status": True, "mailshotid": "99"})

    mailshot_id = logged_client.send_mailshot(
        4, 12, title="Novidades", from_address="news@smartmessages.net", when="2024-12-01 10:00:00"
    )

    assert mailshot_id == 99
    params = transport.last.params
    assert params["templateid"] == 4
    assert params["listid"] == 12
    assert params["campaignid"] == 0
    assert params["fromaddr"] == "news@smartmessages.net"
    assert params["replyto"] == ""
    assert params["when"] == "2024-12-01 10:00:00"
    assert params["continuous"] == 0


def test_send_mailshot_rejects_invalid_sender(logged_client, transport):
    with pytest.raises(ParameterError):
        logged_client.send_mailshot(4, 12, from_address="invalido")
    with pytest.raises(ParameterError):
        logged_client.send_mailshot(4, 12, reply_to="tambem invalido")
    assert transport.call_count == 0


def test_add_template_posts_content(logged_client, transport):
    transport.queue({"status": True, "templateid": 55})

    template_id = logged_client.add_template(
        "Boas vindas", "<p>Ola [[firstname]]</p>", "Ola [[firstname]]", "Bem-vindo", generate_plain=True
    )

    assert template_id == 55
    call = transport.last
    assert call.method == "POST"
    assert call.data["html"] == "<p>Ola [[firstname]]</p>"
    assert call.data["generateplain"] == 1
    assert call.data["importimages"] == 0


def test_add_template_reads_html_from_file(logged_client, transport, tmp_path):
    html = tmp_path / "template.html"
    html.write_text("<html><body>Oferta</body></html>", encoding="utf-8")
    transport.queue({"status": True, "templateid": 56})

    logged_client.add_template("Oferta", html, "Oferta", "Oferta da semana")

    assert transport.last.data["html"] == "<html><body>Oferta</body></html>"


@pytest.mark.parametrize("content", [b"", b"<p>"])
def test_template_file_must_have_content(logged_client, transport, tmp_path, content):
    html = tmp_path / "vazio.html"
    html.write_bytes(content)
    with pytest.raises(ParameterError):
        logged_client.update_template(3, "Nome", html, "texto", "Assunto")
    with pytest.raises(ParameterError):
        logged_client.add_template("Nome", Path(tmp_path / "faltando.html"), "texto", "Assunto")
    assert transport.call_count == 0


def test_add_template_from_url(logged_client, transport):
    with pytest.raises(ParameterError):
        logged_client.add_template_from_url("Nome", "pagina.html", "Assunto")
    assert transport.call_count == 0

    transport.queue({"status": True, "templateid": "15"})
    assert logged_client.add_template_from_url("Nome", "https://meusite.com.br/news.html", "Assunto") == 15


def test_templates_listing_flags(logged_client, transport):
    transport.queue({"status": True, "templates": {"1": {"id": 1}}})
    assert logged_client.get_templates(include_global=True) == {"1": {"id": 1}}
    assert transport.last.params["includeglobal"] == 1
    assert transport.last.params["includeinherited"] == 1


def test_get_test_list_returns_whole_envelope(logged_client, transport):
    transport.queue({"status": True, "id": 2, "name": "Teste", "description": "Lista de teste"})
    test_list = logged_client.get_test_list()
    assert test_list["id"] == 2
    assert test_list["name"] == "Teste"


def test_upload_info_and_cancel(logged_client, transport):
    transport.queue({"status": True, "upload": {"id": 42, "status": "pending"}})
    assert logged_client.get_upload_info(5, 42) == {"id": 42, "status": "pending"}

    assert logged_client.cancel_upload(5, 42) is True
    assert transport.last.params["uploadid"] == 42


def test_operation_rejects_unknown_and_missing_arguments():
    op = Operation("fake", "fake", params=(Param("list_id", "listid"),))
    with pytest.raises(ParameterError):
        op.bind({})
    with pytest.raises(ParameterError):
        op.bind({"list_id": 1, "extra": 2})


def test_registry_covers_every_command():
    commands = {op.command for op in OPERATIONS.values()}
    assert len(commands) == len(OPERATIONS)
    assert {"login", "logout", "uploadlist", "sendmailshot", "setfieldorder"} <= commands
