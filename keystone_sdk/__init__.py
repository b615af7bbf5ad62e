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
A client library for the OpenStack Identity (Keystone) v3 API.
"""

from keystone_sdk.api.authenticator import Authenticator  # noqa
from keystone_sdk.api.catalog import ServiceCatalog  # noqa
from keystone_sdk.api.common import exceptions  # noqa
from keystone_sdk.api.common.data import AppCredential  # noqa
from keystone_sdk.api.common.data import Token  # noqa
from keystone_sdk.api.common.results import Result  # noqa
from keystone_sdk.api.keystoneClient.client import KeystoneClient  # noqa
from keystone_sdk.api.keystoneClient.options import CreateTokenOptions  # noqa
from keystone_sdk.api.keystoneClient.options import ListUsersOptions  # noqa
from keystone_sdk.api.keystoneClient.options import TimeFilter  # noqa
from keystone_sdk.api.keystone_api import KeystoneAPI  # noqa
from keystone_sdk.config import Settings  # noqa
from keystone_sdk.version import VERSION as __version__  # noqa
