"""
Descritores declarativos das operacoes da API.

Cada Operation descreve o comando remoto, o verbo HTTP, os parametros
(com validador e nome no servidor) e o campo extraido da resposta.
SmartmessagesHttpClient.call() executa qualquer descritor.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import validators as v
from .exceptions import ParameterError
from .models import Envelope

REQUIRED = object()
STATUS = "status"


@dataclass(frozen=True)
class Param:
    """Parametro de uma operacao."""
    name: str
    wire: str = ""
    validator: Optional[Callable[[Any, str], Any]] = None
    default: Any = REQUIRED

    @property
    def wire_name(self) -> str:
        return self.wire or self.name


@dataclass(frozen=True)
class BoundRequest:
    """Requisicao pronta: params na ordem do descritor, arquivos e modo raw."""
    verb: str
    command: str
    params: Dict[str, Any]
    files: List[Any]
    raw: bool


@dataclass(frozen=True)
class Operation:
    """Descritor de uma operacao da API."""
    name: str
    command: str
    verb: str = "get"
    params: Tuple[Param, ...] = ()
    result: Optional[str] = None
    cast: Optional[Callable[[Any], Any]] = None
    raw_flag: Optional[str] = None
    files: Tuple[str, ...] = ()
    fixed: Tuple[Tuple[str, Any], ...] = ()

    def bind(self, arguments: Dict[str, Any]) -> BoundRequest:
        """Valida os argumentos localmente e monta a requisicao."""
        known = {p.name for p in self.params}
        unexpected = set(arguments) - known
        if unexpected:
            raise ParameterError(
                f"Unexpected parameters for {self.name}: {', '.join(sorted(unexpected))}"
            )

        params: Dict[str, Any] = dict(self.fixed)
        files: List[Any] = []
        raw = False
        for param in self.params:
            value = arguments.get(param.name, param.default)
            if value is REQUIRED:
                raise ParameterError(f"Missing parameter {param.name} for {self.name}")
            if param.validator is not None:
                value = param.validator(value, param.name)
            if param.name == self.raw_flag:
                raw = bool(value)
            if param.name in self.files:
                files.append(value)
            else:
                params[param.wire_name] = value
        return BoundRequest(self.verb, self.command, params, files, raw)

    def extract(self, envelope: Envelope) -> Any:
        """Extrai o resultado do envelope de sucesso."""
        if self.result is None:
            value = envelope.data
        elif self.result == STATUS:
            value = envelope.status
        else:
            value = envelope.get(self.result)
        if self.cast is not None and value is not None:
            value = self.cast(value)
        return value


def _user_info(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ParameterError(f"Invalid {name}: expected a mapping of user properties")
    return value


def _id(name: str, wire: str) -> Param:
    return Param(name, wire, v.positive_id)


def _address(name: str = "address") -> Param:
    return Param(name, "address", v.email_address)


def _flag(name: str, wire: str = "", default: bool = False) -> Param:
    return Param(name, wire, None, default)


def _text(name: str, wire: str = "", default: Any = "") -> Param:
    return Param(name, wire, v.trimmed, default)


def _report(name: str, command: str, result: str) -> Operation:
    return Operation(
        name, command,
        params=(_id("mailshot_id", "mailshotid"), _flag("as_csv", "ascsv")),
        result=result, raw_flag="as_csv",
    )


def _template_fields() -> Tuple[Param, ...]:
    return (
        Param("name", "name", v.non_empty_text),
        Param("html", "html", v.content_or_file),
        Param("plain", "plain", v.content_or_file),
        Param("subject", "subject", v.trimmed),
        _text("description"),
        _flag("generate_plain", "generateplain"),
        _flag("import_images", "importimages"),
        _flag("convert_format", "convertformat"),
        _flag("inline"),
    )


# SESSAO

LOGIN = Operation(
    "login", "login",
    params=(
        Param("username", "username", v.non_empty_text),
        Param("password", "password", v.secret),
        Param("apikey", "apikey", v.secret),
        Param("outputformat", "outputformat", None, "json"),
    ),
)
LOGOUT = Operation("logout", "logout", result=STATUS)
PING = Operation("ping", "ping", result=STATUS)

# LISTAS

GET_LISTS = Operation(
    "get_lists", "getlists",
    params=(_flag("show_all", "showall"),),
    result="mailinglists",
)
GET_TEST_LIST = Operation("get_test_list", "gettestlist")
GET_LIST = Operation(
    "get_list", "getlist",
    params=(_id("list_id", "listid"), _flag("as_csv", "ascsv", True)),
    result="list", raw_flag="as_csv",
)
ADD_LIST = Operation(
    "add_list", "addlist",
    params=(
        Param("name", "name", v.non_empty_text),
        _text("description"),
        _flag("visible", default=True),
    ),
    result="listid", cast=int,
)
UPDATE_LIST = Operation(
    "update_list", "updatelist",
    params=(
        _id("list_id", "listid"),
        Param("name", "name", v.non_empty_text),
        Param("description", "description", v.trimmed),
        Param("visible"),
    ),
    result=STATUS,
)
DELETE_LIST = Operation(
    "delete_list", "deletelist",
    params=(_id("list_id", "listid"),),
    result=STATUS,
)
GET_LIST_UNSUBS = Operation(
    "get_list_unsubs", "getlistunsubs",
    params=(_id("list_id", "listid"),),
    result="unsubscribes",
)
UPLOAD_LIST = Operation(
    "upload_list", "uploadlist", verb="post",
    params=(
        _id("list_id", "listid"),
        Param("filename", "", v.upload_file),
        Param("source", "source", v.non_empty_text),
        _flag("definitive"),
        _flag("replace"),
        _flag("field_order_first_line", "fieldorderfirstline"),
    ),
    result="uploadid", cast=int,
    files=("filename",),
    fixed=(("method", "uploadlist"),),
)
GET_UPLOAD_INFO = Operation(
    "get_upload_info", "getuploadinfo",
    params=(_id("list_id", "listid"), _id("upload_id", "uploadid")),
    result="upload",
)
GET_UPLOADS = Operation(
    "get_uploads", "getuploads",
    params=(_id("list_id", "listid"),),
    result="uploads",
)
CANCEL_UPLOAD = Operation(
    "cancel_upload", "cancelupload",
    params=(_id("list_id", "listid"), _id("upload_id", "uploadid")),
    result=STATUS,
)
GET_FIELD_ORDER = Operation("get_field_order", "getfieldorder", result="fields")
SET_FIELD_ORDER = Operation(
    "set_field_order", "setfieldorder",
    params=(Param("fields", "fields", v.field_order),),
    result="fields",
)

# ASSINANTES

SUBSCRIBE = Operation(
    "subscribe", "subscribe",
    params=(
        _address(),
        _id("list_id", "listid"),
        _text("dear", "name"),
        _text("first_name", "firstname"),
        _text("last_name", "lastname"),
    ),
    result=STATUS,
)
UNSUBSCRIBE = Operation(
    "unsubscribe", "unsubscribe",
    params=(_address(), _id("list_id", "listid")),
    result=STATUS,
)
ADD_SUBSCRIPTION = Operation(
    "add_subscription", "addsubscription",
    params=(_address(), _id("list_id", "listid"), _text("note")),
    result=STATUS,
)
DELETE_SUBSCRIPTION = Operation(
    "delete_subscription", "deletesubscription",
    params=(_address(), _id("list_id", "listid")),
    result=STATUS,
)
GET_USER_INFO = Operation(
    "get_user_info", "getuserinfo",
    params=(_address(),),
    result="userinfo",
)
SET_USER_INFO = Operation(
    "set_user_info", "setuserinfo",
    params=(_address(), Param("user_info", "userinfo", _user_info)),
    result=STATUS,
)
GET_SPAM_REPORTERS = Operation("get_spam_reporters", "getspamreporters", result="spamreporters")

# CONTA

GET_CALLBACK_URL = Operation("get_callback_url", "getcallbackurl", result="url")
SET_CALLBACK_URL = Operation(
    "set_callback_url", "setcallbackurl",
    params=(Param("url", "url", v.absolute_url),),
    result=STATUS,
)
VALIDATE_ADDRESS = Operation(
    "validate_address", "validateaddress",
    params=(_address(),),
    result="valid", cast=bool,
)

# CAMPANHAS E MAILSHOTS

GET_CAMPAIGNS = Operation("get_campaigns", "getcampaigns", result="campaigns")
ADD_CAMPAIGN = Operation(
    "add_campaign", "addcampaign",
    params=(Param("name", "name", v.non_empty_text),),
    result="campaignid", cast=int,
)
UPDATE_CAMPAIGN = Operation(
    "update_campaign", "updatecampaign",
    params=(_id("campaign_id", "campaignid"), Param("name", "name", v.non_empty_text)),
    result=STATUS,
)
DELETE_CAMPAIGN = Operation(
    "delete_campaign", "deletecampaign",
    params=(_id("campaign_id", "campaignid"),),
    result=STATUS,
)
GET_CAMPAIGN_MAILSHOTS = Operation(
    "get_campaign_mailshots", "getcampaignmailshots",
    params=(_id("campaign_id", "campaignid"),),
    result="mailshots",
)
GET_MAILSHOT = Operation(
    "get_mailshot", "getmailshot",
    params=(_id("mailshot_id", "mailshotid"),),
    result="mailshot",
)
GET_MAILSHOT_CLICKS = _report("get_mailshot_clicks", "getmailshotclicks", "clicks")
GET_MAILSHOT_OPENS = _report("get_mailshot_opens", "getmailshotopens", "opens")
GET_MAILSHOT_UNSUBS = _report("get_mailshot_unsubs", "getmailshotunsubs", "unsubs")
GET_MAILSHOT_BOUNCES = _report("get_mailshot_bounces", "getmailshotbounces", "bounces")
SEND_MAILSHOT = Operation(
    "send_mailshot", "sendmailshot",
    params=(
        _id("template_id", "templateid"),
        _id("list_id", "listid"),
        _text("title"),
        Param("campaign_id", "campaignid", v.optional_id, 0),
        _text("subject"),
        Param("from_address", "fromaddr", v.optional_email, ""),
        _text("from_name", "fromname"),
        Param("reply_to", "replyto", v.optional_email, ""),
        Param("when", "when", v.trimmed, "now"),
        _flag("continuous"),
        _flag("inline"),
    ),
    result="mailshotid", cast=int,
)

# TEMPLATES

GET_TEMPLATES = Operation(
    "get_templates", "gettemplates",
    params=(
        _flag("include_global", "includeglobal"),
        _flag("include_inherited", "includeinherited", True),
    ),
    result="templates",
)
GET_TEMPLATE = Operation(
    "get_template", "gettemplate",
    params=(_id("template_id", "templateid"),),
    result="template",
)
ADD_TEMPLATE = Operation(
    "add_template", "addtemplate", verb="post",
    params=_template_fields(),
    result="templateid", cast=int,
)
UPDATE_TEMPLATE = Operation(
    "update_template", "updatetemplate", verb="post",
    params=(_id("template_id", "templateid"),) + _template_fields(),
    result=STATUS,
)
ADD_TEMPLATE_FROM_URL = Operation(
    "add_template_from_url", "addtemplatefromurl",
    params=(
        Param("name", "name", v.non_empty_text),
        Param("url", "url", v.absolute_url),
        Param("subject", "subject", v.trimmed),
        _text("description"),
        _flag("import_images", "importimages"),
        _flag("convert_format", "convertformat"),
        _flag("inline"),
    ),
    result="templateid", cast=int,
)
DELETE_TEMPLATE = Operation(
    "delete_template", "deletetemplate",
    params=(_id("template_id", "templateid"),),
    result=STATUS,
)

OPERATIONS: Dict[str, Operation] = {
    op.name: op for op in (
        LOGIN, LOGOUT, PING,
        GET_LISTS, GET_TEST_LIST, GET_LIST, ADD_LIST, UPDATE_LIST, DELETE_LIST,
        GET_LIST_UNSUBS, UPLOAD_LIST, GET_UPLOAD_INFO, GET_UPLOADS, CANCEL_UPLOAD,
        GET_FIELD_ORDER, SET_FIELD_ORDER,
        SUBSCRIBE, UNSUBSCRIBE, ADD_SUBSCRIPTION, DELETE_SUBSCRIPTION,
        GET_USER_INFO, SET_USER_INFO, GET_SPAM_REPORTERS,
        GET_CALLBACK_URL, SET_CALLBACK_URL, VALIDATE_ADDRESS,
        GET_CAMPAIGNS, ADD_CAMPAIGN, UPDATE_CAMPAIGN, DELETE_CAMPAIGN,
        GET_CAMPAIGN_MAILSHOTS, GET_MAILSHOT,
        GET_MAILSHOT_CLICKS, GET_MAILSHOT_OPENS, GET_MAILSHOT_UNSUBS, GET_MAILSHOT_BOUNCES,
        SEND_MAILSHOT,
        GET_TEMPLATES, GET_TEMPLATE, ADD_TEMPLATE, UPDATE_TEMPLATE,
        ADD_TEMPLATE_FROM_URL, DELETE_TEMPLATE,
    )
}
