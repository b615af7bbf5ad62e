#!/usr/bin/env python
# (c) Copyright [2015] Hewlett-Packard Development Company, L.P.
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

import setuptools

setuptools.setup(
    name='keystone-sdk',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    version='0.1.0',
    description='Client library for the OpenStack Identity v3 API',
    long_description='Authenticates against OpenStack Keystone, keeps the '
                     'token fresh and gives access to the token, catalog, '
                     'project, domain, user and application credential '
                     'APIs',
    author='HP Storage Cloud Team',
    keywords=['openstack', 'keystone', 'identity'],
    license='Apache',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: OpenStack',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.7',
    install_requires=['requests'],
    extras_require={'test': ['pytest']},
)
