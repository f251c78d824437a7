from enum import StrEnum


class Stack(StrEnum):
    BACKEND = 'backend'
    FRONTEND = 'frontend'


class Level(StrEnum):
    DEBUG = 'debug'
    INFO = 'info'
    WARN = 'warn'
    ERROR = 'error'
    FATAL = 'fatal'


class Package(StrEnum):
    # Backend-only packages
    CACHE = 'cache'
    CONTROLLER = 'controller'
    CRON_JOB = 'cron_job'
    DB = 'db'
    DOMAIN = 'domain'
    HANDLER = 'handler'
    REPOSITORY = 'repository'
    ROUTE = 'route'
    SERVICE = 'service'
    # Frontend-only packages
    API = 'api'
    COMPONENT = 'component'
    HOOK = 'hook'
    PAGE = 'page'
    STATE = 'state'
    STYLE = 'style'
    # Shared packages
    AUTH = 'auth'
    CONFIG = 'config'
    MIDDLEWARE = 'middleware'
    UTILS = 'utils'
