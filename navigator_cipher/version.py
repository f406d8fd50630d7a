"""Navigator Cipher Meta information.
   Navigator Cipher encrypts short secrets into opaque base64 strings.
"""
__title__ = 'navigator_cipher'
__description__ = (
   'Navigator Cipher encrypts short secrets (credentials, tokens) '
   'into opaque base64 strings for storage.'
)
__version__ = '0.1.0'
__copyright__ = 'Copyright (c) 2023 Jesus Lara'
__author__ = 'Jesus Lara'
__author_email__ = 'jesuslarag@gmail.com'
__license__ = 'Apache-2.0'
