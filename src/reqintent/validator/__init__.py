"""Declarative field validation.

Validators decide whether a single field value satisfies a variant's character class and a set of
`ValidationOptions`. Failures are typed results, not control flow.
"""
