"""
Route table for the S3 logging demo API.

Each test path exists to trip a specific class of WAF rule so the resulting
log records can be inspected in S3. Unknown paths get the welcome payload
with a 200, unlike the ALB demo which answers 404.
"""

from service.logic.routing import Route, RouteTable
from service.models.output import (
    BotDetectionTestOutput,
    HealthOutput,
    RateLimitTestOutput,
    SqlInjectionTestOutput,
    WelcomeOutput,
)
from service.models.request import HttpRequest

SQL_TEST_PATH = '/test-sql'
BOT_TEST_PATH = '/test-bot'
RATE_LIMIT_TEST_PATH = '/test-rate-limit'
HEALTH_PATH = '/health'

UNKNOWN_USER_AGENT = 'Unknown'

ENDPOINTS = [
    f'{SQL_TEST_PATH} - Test SQL injection detection',
    f'{BOT_TEST_PATH} - Test bot detection',
    f'{RATE_LIMIT_TEST_PATH} - Test rate limiting',
    f'{HEALTH_PATH} - Health check',
]


def build_sql_test(request: HttpRequest) -> SqlInjectionTestOutput:
    return SqlInjectionTestOutput(query=dict(request.query_string_parameters))


def build_bot_test(request: HttpRequest) -> BotDetectionTestOutput:
    return BotDetectionTestOutput(user_agent=request.header('user-agent') or UNKNOWN_USER_AGENT)


def build_rate_limit_test(request: HttpRequest) -> RateLimitTestOutput:
    return RateLimitTestOutput(client_ip=request.source_ip)


def build_health(request: HttpRequest) -> HealthOutput:
    return HealthOutput()


def build_welcome(request: HttpRequest) -> WelcomeOutput:
    return WelcomeOutput(message='Welcome to WAF S3 Logging Demo', endpoints=list(ENDPOINTS))


waf_test_routes = RouteTable(
    routes=[
        (SQL_TEST_PATH, Route(200, build_sql_test)),
        (BOT_TEST_PATH, Route(200, build_bot_test)),
        (RATE_LIMIT_TEST_PATH, Route(200, build_rate_limit_test)),
        (HEALTH_PATH, Route(200, build_health)),
    ],
    fallback=Route(200, build_welcome),
)
