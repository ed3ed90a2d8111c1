#!/usr/bin/env python3
import aslfiles as files
import asldecode as decode
import aslflags as flags
import aslkeys as keys
import aslroll
import aslutils as utils

if __name__ == '__main__':

    logger = files.makeLogger(__name__, "roll")
    files.logger = logger
    aslroll.logger = logger

    config = files.getSection(files.getConfig(), "roll")
    geobits = utils.getIntArg("geobits", config.get("geobits", 15))
    batchSize = utils.getIntArg("batchsize", config.get("batchSize", 5000))
    maxBatches = utils.getIntArg("maxbatches", config.get("maxBatches", 0))
    if maxBatches <= 0 and "maxTries" in config and config["maxTries"] > 0:
        maxBatches = max(1, config["maxTries"] // batchSize)

    age = utils.getIntArg("age")
    sex = utils.getIntArg("sex")
    location = utils.getCommandArg("location")
    if age is None or sex is None or location is None:
        logger.error("Usage: roll.py --age <0-3> --sex <0-3> --location <geohash> [--geobits 15] [--config file]")
        quit()

    logger.info(f"Rolling for age {age} sex {sex} location {location} using {geobits} geohash bits")
    try:
        sk, tries = aslroll.grind(age, sex, location.lower(), geobits, batchSize, maxBatches)
    except ValueError as e:
        logger.error(str(e))
        quit()
    except KeyboardInterrupt:
        logger.info("Rolling cancelled")
        quit()

    if sk is None:
        logger.warning(f"No matching key within {tries} tries, try again or lower --geobits")
        quit()

    asl = decode.decodeASL(keys.publicKeyHex(sk), geobits)
    print(keys.toNsec(sk))
    print(keys.toNpub(sk))
    flag = flags.flagOf(asl["location"], geobits) if len(asl["location"]) > 0 else ""
    logger.info(f"Public key {keys.publicKeyHex(sk)} decodes as {decode.describeASL(asl)} {flag}")
