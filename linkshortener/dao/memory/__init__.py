from linkshortener.dao.memory.mixins import MemoryStoreMixin
from linkshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO
from linkshortener.dao.memory.click_memory_dao import ClickMemoryDAO


__all__ = [
    'MemoryStoreMixin',
    'ShortURLMemoryDAO',
    'ClickMemoryDAO',
]
