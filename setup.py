import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='patmatch',
    version='0.1.0',
    author='Rodney Meredith McKay',
    # author_email='',
    description='First-match pattern dispatch for Python 3',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests', 'examples']),
    license='GNU LGPL v3',
    keywords=[
        'pattern matching',
        'dispatch',
        'switch statement',
        'case', 'match',
        'regular expressions',
        'predicates',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        # 'Development Status :: 4 - Beta',
        # 'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
        'Topic :: Utilities',
        # 'Typing :: Typed',
    ],
    python_requires='>=3.8',
    extras_require={'test': ['pytest']},
)
