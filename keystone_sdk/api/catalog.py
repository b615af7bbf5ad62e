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

import logging

from keystone_sdk.api.common import exceptions

LOG = logging.getLogger(__name__)

PUBLIC = 'public'
INTERNAL = 'internal'
ADMIN = 'admin'


class ServiceCatalog(object):
    """
    The services registered in the Identity service, as listed in the
    catalog of a token, with lookups by type, name, interface and region.

    :param services: The catalog
    :type services: list of :class:`keystone_sdk.api.common.data.Service`

    """

    def __init__(self, services=None):
        self._services = list(services or [])

    def __len__(self):
        return len(self._services)

    def __repr__(self):
        return "<ServiceCatalog %s>" % ", ".join(self.get_service_types())

    def get_services(self):
        return list(self._services)

    def get_service_types(self):
        """
        Returns the distinct types of the registered services, sorted.
        """
        return sorted(set(s.type for s in self._services if s.type))

    def get_service(self, service_type=None, name=None):
        """
        Returns the first service with the given type and name, or None.
        """
        for service in self._services:
            if service_type and service.type != service_type:
                continue
            if name and service.name != name:
                continue
            return service
        return None

    def get_endpoints(self, service_type, interface=PUBLIC, region=None,
                      name=None):
        """
        Retrieve all the endpoints for the provided service type, interface
        and, if given, region and service name.

        :rtype: list of :class:`keystone_sdk.api.common.data.Endpoint`
        """
        endpoints = []
        for service in self._services:
            if service_type and service.type != service_type:
                continue
            if name and service.name != name:
                continue
            for endpoint in service.endpoints or []:
                if interface and endpoint.interface != interface:
                    continue
                if region and region not in (endpoint.region,
                                             endpoint.region_id):
                    continue
                endpoints.append(endpoint)
        return endpoints

    def get_endpoint_url(self, service_type, interface=PUBLIC, region=None,
                         name=None):
        endpoints = self.get_endpoints(service_type, interface, region, name)
        if not endpoints:
            raise exceptions.EndpointNotFound().where(
                'service_type', service_type).where('interface', interface)
        if len(endpoints) > 1:
            LOG.debug("%d endpoints match %s/%s, using the first one",
                      len(endpoints), service_type, interface)
        return endpoints[0].url

    def get_regions(self, service_type=None):
        regions = set()
        for service in self._services:
            if service_type and service.type != service_type:
                continue
            for endpoint in service.endpoints or []:
                region = endpoint.region_id or endpoint.region
                if region:
                    regions.add(region)
        return sorted(regions)
