# apex/middleware.py
import logging
import os
from abc import ABC, abstractmethod

from django.http import HttpResponse
from django.utils.encoding import escape_uri_path, iri_to_uri

from .decider import Redirect, decide

log = logging.getLogger("app")

APP_ENV_VAR = "APP_ENV"


def _strip_port(host: str) -> str:
    # "[::1]:8000" -> "[::1]", "example.com:8000" -> "example.com"
    if host.endswith("]"):
        return host
    return host.rsplit(":", 1)[0] if ":" in host else host


class AbstractApexMiddleware(ABC):
    """
    Base for middlewares that look at the response of the rest of the stack.
    Django calls the instance; subclasses implement ``process``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.process(request, self.get_response)

    @abstractmethod
    def process(self, request, get_response):
        ...


class ApexMiddleware(AbstractApexMiddleware):
    """
    Permanently redirect apex hosts to "www." (or "www-xx." when APP_ENV ends
    with "-xx"). Hosts already starting with "www." / "www-xx." pass through.
    """

    def process(self, request, get_response):
        response = get_response(request)

        host = _strip_port(request.get_host())
        decision = decide(
            scheme=request.scheme,
            host=host,
            path=escape_uri_path(request.path),
            query=request.META.get("QUERY_STRING", ""),
            app_env=os.environ.get(APP_ENV_VAR, ""),
        )
        if not isinstance(decision, Redirect):
            return response

        log.debug("apex redirect %s -> %s", host, decision.location)
        # urlsplit rejects "www.[::1]", so no HttpResponsePermanentRedirect here
        redirect = HttpResponse(status=decision.status_code)
        redirect["Location"] = iri_to_uri(decision.location)
        return redirect
