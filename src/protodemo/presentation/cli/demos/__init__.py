"""Demonstration units in their default running order."""

from protodemo.core.errors import ConstructorInvocationError
from protodemo.domain.demo_models import DemoUnit

from .classes import run_class_sugar, run_missing_construct_class, run_missing_construct_function
from .composition import run_factory_functions, run_module_pattern, run_vector_swap
from .inheritance import (
    run_instance_of,
    run_method_invocation,
    run_object_create,
    run_prototype_chain,
)
from .invocation import run_function_invocation, run_receiver_binding

DEFAULT_UNITS = (
    DemoUnit("prototype_chain", "Prototypal inheritance", run_prototype_chain),
    DemoUnit("function_invocation", "Function invocation", run_function_invocation),
    DemoUnit(
        "method_invocation",
        "Method invocation",
        run_method_invocation,
        requires=("prototype_chain",),
    ),
    DemoUnit(
        "object_create",
        "Objects built from a template",
        run_object_create,
        requires=("prototype_chain",),
    ),
    DemoUnit("factory_functions", "Factory functions and composition", run_factory_functions),
    DemoUnit("module_pattern", "Module pattern", run_module_pattern),
    DemoUnit("vector_swap", "Swapping without a temporary", run_vector_swap),
    DemoUnit("receiver_binding", "Dynamic and lexical receivers", run_receiver_binding),
    DemoUnit(
        "class_sugar",
        "Classes and constructor functions",
        run_class_sugar,
        requires=("prototype_chain",),
    ),
    DemoUnit(
        "instance_of",
        "Instance-of queries",
        run_instance_of,
        requires=("prototype_chain", "object_create"),
    ),
    DemoUnit(
        "missing_construct_function",
        "Constructor function called without construct",
        run_missing_construct_function,
        requires=("prototype_chain",),
        expected_error=AttributeError,
    ),
    DemoUnit(
        "missing_construct_class",
        "Class called without construct",
        run_missing_construct_class,
        requires=("class_sugar",),
        expected_error=ConstructorInvocationError,
    ),
)

__all__ = ["DEFAULT_UNITS"]
