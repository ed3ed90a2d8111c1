#!/usr/bin/env python3
import sys
import aslfiles as files
import asldecode as decode
import aslflags as flags
import aslutils as utils

if __name__ == '__main__':

    logger = files.makeLogger(__name__, "decode")
    files.logger = logger

    if len(sys.argv) <= 1 or sys.argv[1].startswith("--"):
        logger.error("No npub or hex public key provided")
        quit()

    config = files.getSection(files.getConfig(), "decode")
    geobits = utils.getIntArg("geobits", config.get("geobits", 15))

    try:
        asl = decode.decodeASL(sys.argv[1], geobits)
    except ValueError as e:
        logger.error(str(e))
        quit()

    print(f"age: {asl['age']} ({decode.AGES[asl['age']]})")
    print(f"sex: {asl['sex']} ({decode.SEXES[asl['sex']]})")
    print(f"location: {asl['location']}")
    if len(asl["location"]) > 0:
        print(f"flag: {flags.flagOf(asl['location'], geobits)}")
