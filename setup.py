"""Installation script."""
import setuptools


PACKAGE_NAME = 'robdd'
DESCRIPTION = (
    'Reduced ordered binary decision diagrams '
    'implemented in pure Python.')
LONG_DESCRIPTION = (
    'robdd is a package for working with reduced ordered '
    'binary decision diagrams of Boolean functions. '
    'Each diagram is stored in a canonical node table, '
    'and can be synthesized from a truth table, '
    'combined with binary operators, '
    'restricted, composed with other diagrams, '
    'compared for equivalence, and exported to '
    'networkx and pydot graphs.')
VERSION_FILE = f'{PACKAGE_NAME}/_version.py'
VERSION = '0.1.0'
VERSION_FILE_TEXT = (
    '# This file was generated from setup.py\n'
    "version = '{version}'\n")
PYTHON_REQUIRES = '>=3.11'
INSTALL_REQUIRES = [
    'networkx >= 2.4',
    'pydot >= 1.2.2',
    'setuptools >= 65.6.0']
TESTS_REQUIRE = [
    'pytest >= 4.6.11']
CLASSIFIERS = [
    'Development Status :: 2 - Pre-Alpha',
    'Intended Audience :: Developers',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Software Development']
KEYWORDS = [
    'bdd',
    'robdd',
    'binary decision diagram',
    'decision diagram',
    'boolean',
    'networkx',
    'dot',
    'graphviz']


def run_setup(
        ) -> None:
    """Write version file, install."""
    s = VERSION_FILE_TEXT.format(version=VERSION)
    with open(VERSION_FILE, 'w') as f:
        f.write(s)
    setuptools.setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        license='BSD',
        python_requires=PYTHON_REQUIRES,
        install_requires=INSTALL_REQUIRES,
        extras_require=dict(test=TESTS_REQUIRE),
        packages=[PACKAGE_NAME],
        package_dir={PACKAGE_NAME: PACKAGE_NAME},
        include_package_data=True,
        zip_safe=False,
        classifiers=CLASSIFIERS,
        keywords=KEYWORDS)


if __name__ == '__main__':
    run_setup()
