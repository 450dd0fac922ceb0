"""
Step definitions for provider capability registration tests.
"""

from behave import given, when, then

from dns_capabilities.core.capabilities import Capability
from dns_capabilities.core.errors import UnrecognizedMetadataError
from dns_capabilities.core.notes import DocumentationNotes, supported, unsupported
from dns_capabilities.core.registry import ProviderRegistry
from dns_capabilities.providers.builtin import register_builtin_providers


@given("an empty provider registry")
def step_impl(context):
    """Create a fresh registry for the scenario."""
    context.registry = ProviderRegistry()


@given("the registry raises on unrecognized metadata")
def step_impl(context):
    context.registry.on_error = "raise"


@given("the registry skips providers with unrecognized metadata")
def step_impl(context):
    context.registry.on_error = "skip"


@when('provider "{provider}" registers capabilities "{names}"')
def step_impl(context, provider, names):
    capabilities = [Capability.from_name(name) for name in names.split(",")]
    context.result = context.registry.register_metadata(provider, capabilities)


@when('provider "{provider}" registers capability "{name}" with note "{comment}"')
def step_impl(context, provider, name, comment):
    capability = Capability.from_name(name)
    context.result = context.registry.register_metadata(
        provider, [capability, DocumentationNotes({capability: supported(comment)})]
    )


@when('provider "{provider}" registers a supported note "{comment}" for "{name}"')
def step_impl(context, provider, comment, name):
    notes = DocumentationNotes({Capability.from_name(name): supported(comment)})
    context.result = context.registry.register_metadata(provider, [notes])


@when('provider "{provider}" registers an unsupported note "{comment}" for "{name}"')
def step_impl(context, provider, comment, name):
    notes = DocumentationNotes({Capability.from_name(name): unsupported(comment)})
    context.result = context.registry.register_metadata(provider, [notes])


@when('provider "{provider}" registers capability "{name}" and an unrecognized item')
def step_impl(context, provider, name):
    try:
        context.result = context.registry.register_metadata(
            provider, [Capability.from_name(name), name]
        )
    except UnrecognizedMetadataError as e:
        context.error = e


@when("the built-in providers are registered")
def step_impl(context):
    register_builtin_providers(context.registry)


@then('provider "{provider}" supports "{name}"')
def step_impl(context, provider, name):
    assert context.registry.has_capability(provider, Capability.from_name(name))


@then('provider "{provider}" does not support "{name}"')
def step_impl(context, provider, name):
    assert not context.registry.has_capability(provider, Capability.from_name(name))


@then('provider "{provider}" has no documentation notes')
def step_impl(context, provider):
    assert len(context.registry.notes_for(provider)) == 0


@then('the note for "{name}" on provider "{provider}" has comment "{comment}"')
def step_impl(context, name, provider, comment):
    note = context.registry.notes_for(provider)[Capability.from_name(name)]
    assert note.comment == comment, f"Expected '{comment}', got '{note.comment}'"


@then('registration fails naming type "{type_name}"')
def step_impl(context, type_name):
    assert context.error is not None, "Registration did not fail"
    assert context.error.type_name == type_name
    assert type_name in str(context.error)


@then("the registration is skipped")
def step_impl(context):
    assert context.error is None
    assert context.result is False
