#!/usr/bin/env python3
from logging.handlers import RotatingFileHandler
import json
import logging
import os
import shutil
import sys
import time
import aslutils as utils

logger = logging.getLogger(__name__)    # replaced by scripts

dataFolder = "data/"
logFolder = f"{dataFolder}logs/"
configFilename = f"{dataFolder}config.json"
sampleConfigFilename = "sample-config.json"

def makeFolders():
    utils.makeFolderIfNotExists(dataFolder)
    utils.makeFolderIfNotExists(logFolder)

def makeLogger(name, logName):
    # stdout for systemd, plus a rotating file
    makeFolders()
    newLogger = logging.getLogger(name)
    newLogger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt="%(asctime)s %(name)s.%(levelname)s: %(message)s", datefmt="%Y.%m.%d %H:%M:%S")
    logging.Formatter.converter = time.gmtime
    stdoutLoggingHandler = logging.StreamHandler(stream=sys.stdout)
    stdoutLoggingHandler.setFormatter(formatter)
    newLogger.addHandler(stdoutLoggingHandler)
    logFile = f"{logFolder}{logName}.log"
    fileLoggingHandler = RotatingFileHandler(logFile, mode='a', maxBytes=10*1024*1024,
                                 backupCount=21, encoding=None, delay=0)
    fileLoggingHandler.setFormatter(formatter)
    newLogger.addHandler(fileLoggingHandler)
    return newLogger

def loadJsonFile(filename, default=None):
    if filename is None: return default
    if not os.path.exists(filename): return default
    with open(filename) as f:
        return(json.load(f))

def getConfig(filename=configFilename):
    c = utils.getCommandArg("config") # allow overriding default filename
    if c is not None: filename = c
    logger.debug(f"Loading config from {filename}")
    if not os.path.exists(filename):
        if c is None and os.path.exists(sampleConfigFilename):
            makeFolders()
            shutil.copy(sampleConfigFilename, filename)
            logger.info(f"Copied {sampleConfigFilename} to {filename}")
        else:
            logger.warning(f"Config file does not exist at {filename}")
            return {}
    return loadJsonFile(filename, {})

def getSection(config, section):
    if section in config: return config[section]
    return {}
