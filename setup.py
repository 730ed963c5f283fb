#!/usr/bin/env python

import os
import re
import timeit
from setuptools import setup, Command

def get_version():
    path = os.path.join(os.path.dirname(__file__), "src", "cpace", "_version.py")
    with open(path) as f:
        return re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        S1 = "from cpace import CPace_A, CPace_B"
        S2 = "sA = CPace_A(b'password', b'client', b'server', b'ad')"
        S3 = "m1 = sA.start()"
        S4 = "m2, kB = CPace_B(b'password', b'client', b'server', b'ad').respond(m1)"
        S5 = "kA = sA.finish(m2)"

        full = do([S1], ";".join([S2, S3, S4, S5]))
        start = do([S1], ";".join([S2, S3]))
        respond = do([S1, S2, S3], S4)
        from cpace import STEP1_PACKET_BYTES, STEP2_PACKET_BYTES
        print("ristretto255: msglen=%d+%d, full=%6s, start=%6s, respond=%6s"
              % (STEP1_PACKET_BYTES, STEP2_PACKET_BYTES,
                 abbrev(full), abbrev(start), abbrev(respond)))

setup(name="cpace",
      version=get_version(),
      description="CPace password-authenticated key exchange over ristretto255",
      author="cpace contributors",
      url="https://datatracker.ietf.org/doc/draft-irtf-cfrg-cpace/",
      package_dir={"": "src"},
      packages=["cpace", "cpace.test"],
      license="MIT",
      cmdclass={"speed": Speed},
      python_requires=">=3.6",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["pysodium"],
      extras_require={"test": ["pytest"]},
      )
