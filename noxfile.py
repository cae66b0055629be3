import nox

_PYTHON_VERSIONS = ['3.8', '3.12']
_LOCATIONS = ["tests"]


# Run only test session when no arguments are specified
nox.options.sessions = ["test"]


@nox.session(venv_backend="conda")
@nox.parametrize('version', _PYTHON_VERSIONS)
def test(session, version):
    args = session.posargs or _LOCATIONS
    session.conda_install(f'python={version}')
    session.install('.[tests]')
    session.run("pytest", *args)
