# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""fantomo specific exceptions."""

__all__ = ('InvalidParameterError', 'GeometryInconsistencyError',
           'OpTypeError', 'OpDomainError', 'OpRangeError',
           'OperatorNotImplementedError')


class InvalidParameterError(ValueError):
    """Exception for invalid scan parameters.

    Raised when the parameters of a scanning geometry violate their
    constraints, e.g. a source inside the image domain or a fan angle
    outside ``[0, 180]`` degrees. It is raised before any geometry is
    computed.
    """


class GeometryInconsistencyError(RuntimeError):
    """Exception for internally inconsistent ray geometry.

    Raised when a ray cannot be traced, e.g. because its direction
    vector is zero. This indicates a bug rather than bad user input.
    """


class OpTypeError(TypeError):
    """Exception for operator type errors.

    Raised by `Operator` subclasses when they are called with input of
    the wrong size, or when they produce output of the wrong size.
    """


class OpDomainError(OpTypeError):
    """Exception for domain errors.

    Domain errors are raised by `Operator` subclasses when trying to call
    them with input whose length does not match ``Operator.shape[1]``.
    """


class OpRangeError(OpTypeError):
    """Exception for range errors.

    Range errors are raised by `Operator` subclasses when the returned
    value does not have length ``Operator.shape[0]``.
    """


class OperatorNotImplementedError(NotImplementedError):
    """Exception for not implemented operator functionality.

    These are raised when a method in `Operator` that has not been
    defined in a specific operator is called, e.g. ``adjoint``.
    """
