from linkshortener.dao.base.short_url_base_dao import ShortURLBaseDAO
from linkshortener.dao.base.click_base_dao import ClickBaseDAO


__all__ = [
    'ShortURLBaseDAO',
    'ClickBaseDAO',
]
