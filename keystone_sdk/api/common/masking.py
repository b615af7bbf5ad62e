# (c) Copyright [2015] Hewlett Packard Enterprise Development LP
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""
Hides credentials from the debug logs.
"""

# never written to the debug log in clear
SECRET_HEADERS = ('x-auth-token', 'x-subject-token')
SECRET_KEYS = ('password', 'secret')

MASK = '***'


def zip_secret(value, size=16):
    """
    Shortens a secret for logging, keeping only its ends.
    """
    value = str(value)
    if len(value) <= size:
        return MASK
    keep = size // 4
    return '%s...%s' % (value[:keep], value[-keep:])


def mask_body(body, parent=None):
    """
    Returns a copy of a JSON body with the passwords, the credential
    secrets and the ids of the token identity method replaced by '***'.
    """
    if isinstance(body, dict):
        masked = {}
        for key, value in body.items():
            if key in SECRET_KEYS or (parent == 'token' and key == 'id'):
                masked[key] = MASK
            else:
                masked[key] = mask_body(value, key)
        return masked
    if isinstance(body, list):
        return [mask_body(v, parent) for v in body]
    return body


def mask_headers(headers):
    return dict((k, zip_secret(v) if k.lower() in SECRET_HEADERS else v)
                for k, v in headers.items())
