"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
BUILDER_ACTION = 'builder'
PROXY_ACTION = 'proxy'
LIST_ACTION = 'list'

OK_RETURN_CODE = 0
FAILED_RETURN_CODE = 1

STANDARD_BASIC_PRODUCT_TITLE = 'Standard basic product:'
STANDARD_FULL_FEATURED_PRODUCT_TITLE = 'Standard full featured product:'
CUSTOM_PRODUCT_TITLE = 'Custom product:'
CUSTOM_PRODUCT_STEPS = ('part_a', 'part_c')

REAL_SUBJECT_CLIENT_TITLE = ('Client: Executing the client code with a real '
                             'subject:')
PROXY_CLIENT_TITLE = 'Client: Executing the same client code with a proxy:'

DEMOS_DESCRIPTION = {
    BUILDER_ACTION: 'A director drives a builder through several recipes, '
                    'then the client builds a custom product directly.',
    PROXY_ACTION: 'The same client code runs against a real subject and '
                  'against a proxy guarding it.'
}
