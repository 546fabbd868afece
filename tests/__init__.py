"""agentkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows tested at the CLI boundary.
- e2e/          : Full CLI runs exercising the global logging options.

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, e2e, property
"""
