from xdrcodec.conf.settings import XdrSettings

SETTINGS = XdrSettings(TEXT_ENCODING='utf-8')
