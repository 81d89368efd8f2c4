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

from ..patterns import IBuilder, Director, Product
from patternbook.exceptions import (
    InvalidValueError, InvalidTypeError, BuilderNotAssignedError
)
from typing import Iterable
from functools import singledispatch

STEP_PREFIX = 'produce_'
STEPS = ('part_a', 'part_b', 'part_c')


def produce_custom_product(builder: IBuilder, steps: Iterable[str]
                           ) -> Product:
    """
    Runs the named construction steps directly on a builder, bypassing
    any director, and hands over the resulting product.
    :builder:IBuilder
    :steps:Iterable[str] e.g. ('part_a', 'part_c')
    :return:Product
    """
    if isinstance(steps, str):
        raise InvalidTypeError(f'Steps must be a collection of step names, '
                               f'not a single string `{steps}`.')
    steps = tuple(steps)
    unknown = [step for step in steps if step not in STEPS]
    if unknown:
        raise InvalidValueError(f'Unknown construction steps: {unknown}. '
                                f'Allowed values: {list(STEPS)}')
    for step in steps:
        getattr(builder, STEP_PREFIX + step)()
    return produce_product(builder)


@singledispatch
def produce_product(source):
    raise InvalidTypeError(f'A product cannot be produced out of '
                           f'`{type(source).__name__}`.')


@produce_product.register
def _produce_product(source: IBuilder) -> Product:
    """
    Produces a product out of IBuilder.
    :return: Product
    """
    return source.product


@produce_product.register
def _produce_product(source: Director) -> Product:
    """
    Produces a product out of the builder assigned to a Director.
    :return: Product
    """
    if source.builder is None:
        raise BuilderNotAssignedError('The director has no builder to '
                                      'produce a product out of.')
    return produce_product(source.builder)
