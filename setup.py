#!/usr/bin/env python

import timeit
from setuptools import setup, Command

cmdclass = {}

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
            for i in range(0, 10):
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

        for group in ["G1024", "G2048", "G3072"]:
            for backend in ["IntBackend", "CryptodomeBackend"]:
                S1 = ("from srp6a import Params, SRPClient, SRPServer, "
                      "create_verifier")
                S2 = "from srp6a.groups import %s" % group
                S3 = "from srp6a.backends import %s" % backend
                S4 = "p = Params(%s, backend=%s)" % (group, backend)
                S5 = "salt, v = create_verifier(b'alice', b'pw', params=p)"
                S6 = ("c = SRPClient(b'alice', b'pw', params=p); "
                      "s = SRPServer(salt, v, params=p)")
                S7 = ("A = c.start(); B = s.start(); "
                      "M1 = c.process_challenge(salt, B); "
                      "c.verify_server(s.verify_client(A, M1))")

                full = do([S1, S2, S3, S4, S5], ";".join([S6, S7]))
                verifier = do([S1, S2, S3, S4], S5)
                print("%-5s %-17s: full=%6s, verifier=%6s"
                      % (group, backend, abbrev(full), abbrev(verifier)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange (pure python)",
      url="http://github.com/warner/python-srp6a",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.parameters", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf", "pycryptodome"],
      )
